"""
Declaration-form crusher: rewrites each `struct` declaration into the
opposite shape while keeping its name.

    struct A;           -> struct A();
    struct B(i32);      -> struct B;
    struct C { x: i32 } -> struct C();
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tree_sitter import Node

from ..mutator import Target

KIND = "struct"
NODE_TYPE = "struct_item"

DeclarationForm = Literal["block", "tuple", "unit"]


@dataclass(frozen=True)
class StructDecl:
    name: str
    form: DeclarationForm


def classify_form(data: bytes, end_byte: int) -> DeclarationForm:
    last = data[end_byte - 1:end_byte]
    second_last = data[end_byte - 2:end_byte - 1]
    if last == b"}":
        return "block"
    if second_last == b")":
        return "tuple"
    return "unit"


def matches(node: Node) -> bool:
    return node.type == NODE_TYPE


def extract(node: Node, data: bytes) -> Target:
    name_node = node.child_by_field_name("name")
    name = ""
    if name_node is not None:
        name = data[name_node.start_byte:name_node.end_byte].decode("utf-8")
    return Target(
        start_byte=node.start_byte,
        end_byte=node.end_byte,
        kind=KIND,
        payload=StructDecl(name=name, form=classify_form(data, node.end_byte)),
    )


def replacements_for(target: Target) -> tuple[str, ...]:
    decl: StructDecl = target.payload
    if decl.form == "tuple":
        return (f"struct {decl.name};",)
    return (f"struct {decl.name}();",)
