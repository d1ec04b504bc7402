"""
Rust parser front end: turns source text into a tree-sitter syntax tree.

Byte offsets on every node refer to the UTF-8 encoding of the source, so
callers that splice text must work on the same encoded buffer.
"""
from __future__ import annotations

from pathlib import Path

import tree_sitter_rust
from tree_sitter import Language, Parser, Tree

LANGUAGE_NAME = "rust"
DEFAULT_EXTENSION = "rs"

RUST_LANGUAGE = Language(tree_sitter_rust.language())


class ParseError(Exception):
    """The parser could not build a syntax tree for the input."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        self.path = None if path is None else str(path)
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


def encode_source(source: str | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    return source.encode("utf-8")


def parse_source(
    source: str | bytes,
    *,
    path: str | Path | None = None,
) -> Tree:
    """
    Parse Rust source into a tree.

    A tree that contains ERROR nodes is returned as-is; only a missing tree
    counts as a failure.
    """
    data = encode_source(source)
    parser = Parser(RUST_LANGUAGE)
    try:
        tree = parser.parse(data)
    except ValueError as exc:
        raise ParseError(f"tree-sitter rejected input: {exc}", path=path) from exc
    if tree is None:
        raise ParseError("tree-sitter returned no tree", path=path)
    return tree
