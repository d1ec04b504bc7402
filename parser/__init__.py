from __future__ import annotations

from .parser import (
    DEFAULT_EXTENSION,
    LANGUAGE_NAME,
    RUST_LANGUAGE,
    ParseError,
    encode_source,
    parse_source,
)
from .versions import get_parser, list_versions
from .walker import walk_preorder

__all__ = [
    "DEFAULT_EXTENSION",
    "LANGUAGE_NAME",
    "ParseError",
    "RUST_LANGUAGE",
    "encode_source",
    "get_parser",
    "list_versions",
    "parse_source",
    "walk_preorder",
]
