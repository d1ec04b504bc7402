"""
Mutant generation: locate targets in a parsed tree and splice fixed
replacements over them, one variant per (target, replacement) pair.

All offsets are UTF-8 byte offsets as reported by tree-sitter. Splicing is
done on the encoded buffer and decoded afterwards, so a variant is never
cut inside a multi-byte character.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from tree_sitter import Node, Tree

from parser import encode_source, parse_source, walk_preorder


@dataclass(frozen=True)
class Target:
    start_byte: int
    end_byte: int
    kind: str
    payload: Any = None

    def span_bytes(self, data: bytes) -> bytes:
        return data[self.start_byte:self.end_byte]


@dataclass(frozen=True)
class Variant:
    index_in_file: int
    text: str
    target: Target
    replacement: str


class CrushStrategy(Protocol):
    KIND: str

    def matches(self, node: Node) -> bool: ...

    def extract(self, node: Node, data: bytes) -> Target: ...

    def replacements_for(self, target: Target) -> tuple[str, ...]: ...


def _is_char_boundary(data: bytes, offset: int) -> bool:
    if offset == 0 or offset == len(data):
        return True
    # UTF-8 continuation bytes look like 0b10xxxxxx.
    return (data[offset] & 0xC0) != 0x80


def is_safe_span(
    *,
    text: str,
    data: bytes,
    start_byte: int,
    end_byte: int,
) -> bool:
    """
    Accept a byte span only if it can be spliced without garbling the text.

    The character-count check drops spans whose end offset lies past the
    last character index of the decoded text; with multi-byte characters
    earlier in the file this rejects spans near the end even when they are
    well-formed.
    """
    if start_byte < 0 or end_byte < start_byte or end_byte > len(data):
        return False
    if len(text) <= end_byte - 1:
        return False
    return _is_char_boundary(data, start_byte) and _is_char_boundary(data, end_byte)


def find_targets(
    tree: Tree | Node,
    *,
    data: bytes,
    text: str,
    strategy: CrushStrategy,
) -> Iterator[Target]:
    """Yield safe targets in pre-order discovery order."""
    for node in walk_preorder(tree):
        if not strategy.matches(node):
            continue
        target = strategy.extract(node, data)
        if is_safe_span(
            text=text,
            data=data,
            start_byte=target.start_byte,
            end_byte=target.end_byte,
        ):
            yield target


def splice(data: bytes, target: Target, replacement: str) -> str:
    before = data[:target.start_byte]
    after = data[target.end_byte:]
    return (before + replacement.encode("utf-8") + after).decode("utf-8")


def enumerate_variants(
    *,
    text: str,
    targets: Iterable[Target],
    strategy: CrushStrategy,
) -> Iterator[Variant]:
    data = encode_source(text)
    index = 0
    for target in targets:
        for replacement in strategy.replacements_for(target):
            yield Variant(
                index_in_file=index,
                text=splice(data, target, replacement),
                target=target,
                replacement=replacement,
            )
            index += 1


def crush_variants(
    text: str,
    *,
    strategy: CrushStrategy,
    parse: Callable[..., Tree] = parse_source,
) -> list[Variant]:
    data = encode_source(text)
    tree = parse(data)
    targets = list(find_targets(tree, data=data, text=text, strategy=strategy))
    return list(enumerate_variants(text=text, targets=targets, strategy=strategy))


def crush_source(
    text: str,
    *,
    strategy: CrushStrategy,
    parse: Callable[..., Tree] = parse_source,
) -> list[str]:
    """Return every mutated copy of text, in output order."""
    return [v.text for v in crush_variants(text, strategy=strategy, parse=parse)]
