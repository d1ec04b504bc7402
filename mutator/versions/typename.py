"""
Type-name crusher: replaces every type identifier, wherever it occurs,
with each of a fixed set of stand-ins.
"""
from __future__ import annotations

from tree_sitter import Node

from ..mutator import Target

KIND = "typename"
NODE_TYPE = "type_identifier"

# nothing, a numeric primitive, a string primitive, a marker trait
REPLACEMENTS: tuple[str, ...] = ("", "i32", "str", "Copy")


def matches(node: Node) -> bool:
    return node.type == NODE_TYPE


def extract(node: Node, data: bytes) -> Target:
    return Target(start_byte=node.start_byte, end_byte=node.end_byte, kind=KIND)


def replacements_for(target: Target) -> tuple[str, ...]:
    return REPLACEMENTS
