"""
Registry of grammar front ends selectable with --grammar.

To add one, create a module exporting parse_source, LANGUAGE_NAME and
DEFAULT_EXTENSION, then register it below with _as_version(module).
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from . import rust


def _as_version(module: Any) -> SimpleNamespace:
    return SimpleNamespace(
        parse_source=module.parse_source,
        LANGUAGE_NAME=module.LANGUAGE_NAME,
        DEFAULT_EXTENSION=module.DEFAULT_EXTENSION,
    )


REGISTRY: dict[str, SimpleNamespace] = {
    "rust": _as_version(rust),
}


def get_parser(version: str) -> SimpleNamespace:
    if version not in REGISTRY:
        raise ValueError(
            f"unknown grammar {version!r}; choices: {sorted(REGISTRY)}"
        )
    return REGISTRY[version]


def list_versions() -> list[str]:
    return sorted(REGISTRY.keys())
