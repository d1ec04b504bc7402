"""
Rust grammar: tree-sitter-rust, `.rs` files.
"""
from __future__ import annotations

from ..parser import DEFAULT_EXTENSION, LANGUAGE_NAME, parse_source

__all__ = ["DEFAULT_EXTENSION", "LANGUAGE_NAME", "parse_source"]
