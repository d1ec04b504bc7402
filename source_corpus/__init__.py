from .corpus import (
    SourceFile,
    SourceReadError,
    discover_sources,
    read_source,
)

__all__ = [
    "SourceFile",
    "SourceReadError",
    "discover_sources",
    "read_source",
]
