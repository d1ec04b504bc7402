from __future__ import annotations

from .mutator import (
    CrushStrategy,
    Target,
    Variant,
    crush_source,
    crush_variants,
    enumerate_variants,
    find_targets,
    is_safe_span,
    splice,
)
from .versions import get_strategy, list_versions

__all__ = [
    "CrushStrategy",
    "Target",
    "Variant",
    "crush_source",
    "crush_variants",
    "enumerate_variants",
    "find_targets",
    "get_strategy",
    "is_safe_span",
    "list_versions",
    "splice",
]
