"""
Registry of crush strategies selectable with --strategy.

A strategy module exports KIND, matches(node), extract(node, data) and
replacements_for(target); register it below with _as_strategy(module).
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from ..mutator import CrushStrategy
from . import struct_form, typename


def _as_strategy(module: Any) -> SimpleNamespace:
    return SimpleNamespace(
        KIND=module.KIND,
        matches=module.matches,
        extract=module.extract,
        replacements_for=module.replacements_for,
    )


REGISTRY: dict[str, SimpleNamespace] = {
    struct_form.KIND: _as_strategy(struct_form),
    typename.KIND: _as_strategy(typename),
}


def get_strategy(version: str) -> CrushStrategy:
    if version not in REGISTRY:
        raise ValueError(
            f"unknown crush strategy {version!r}; choices: {sorted(REGISTRY)}"
        )
    return REGISTRY[version]


def list_versions() -> list[str]:
    return sorted(REGISTRY.keys())
