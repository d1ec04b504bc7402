from types import SimpleNamespace

import pytest

from mutator import (
    Target,
    crush_source,
    enumerate_variants,
    find_targets,
    get_strategy,
    is_safe_span,
    splice,
)
from parser import ParseError, parse_source

STRUCT = get_strategy("struct")
TYPENAME = get_strategy("typename")


def _fixed_strategy(*replacements):
    return SimpleNamespace(
        KIND="fixed",
        matches=lambda node: False,
        extract=None,
        replacements_for=lambda target: replacements,
    )


class TestSafeSpan:
    def test_ascii_span_up_to_end_is_safe(self):
        text = "struct A;"
        assert is_safe_span(text=text, data=text.encode(), start_byte=0, end_byte=len(text))

    def test_span_past_end_is_rejected(self):
        text = "struct A;"
        assert not is_safe_span(text=text, data=text.encode(), start_byte=0, end_byte=len(text) + 1)

    def test_inverted_span_is_rejected(self):
        text = "struct A;"
        assert not is_safe_span(text=text, data=text.encode(), start_byte=5, end_byte=4)

    def test_span_inside_multibyte_character_is_rejected(self):
        text = "é;"
        assert not is_safe_span(text=text, data=text.encode(), start_byte=0, end_byte=1)

    def test_end_beyond_last_character_index_is_rejected(self):
        text = "é;"
        # 3 bytes but only 2 characters
        assert not is_safe_span(text=text, data=text.encode(), start_byte=2, end_byte=3)


class TestSafetyFilter:
    SOURCE = "// é\nstruct A;"

    def test_target_at_end_after_multibyte_text_is_dropped(self):
        assert crush_source(self.SOURCE, strategy=STRUCT) == []

    def test_other_targets_in_same_file_are_spliced_intact(self):
        variants = crush_source(self.SOURCE, strategy=TYPENAME)
        assert variants == [
            "// é\nstruct ;",
            "// é\nstruct i32;",
            "// é\nstruct str;",
            "// é\nstruct Copy;",
        ]

    def test_target_is_kept_when_text_continues(self):
        source = "// é\nstruct A;\n"
        assert crush_source(source, strategy=STRUCT) == ["// é\nstruct A();\n"]

    def test_splice_is_byte_accurate_after_multibyte_text(self):
        source = "// ünïcödé\nstruct Point(i32, i32);\n\n\n\n\n\n"
        assert crush_source(source, strategy=STRUCT) == ["// ünïcödé\nstruct Point;\n\n\n\n\n\n"]


@pytest.mark.parametrize("strategy", [STRUCT, TYPENAME])
def test_spans_round_trip(strategy):
    source = (
        "struct Pair(Left, Right);\n"
        "struct Holder { value: Option<Inner> }\n"
        "fn make(p: Pair) -> Holder { todo!() }\n"
    )
    data = source.encode("utf-8")
    targets = list(find_targets(parse_source(data), data=data, text=source, strategy=strategy))
    assert targets
    for target in targets:
        original = target.span_bytes(data).decode("utf-8")
        assert splice(data, target, original) == source


def test_typename_spans_cover_exactly_the_names():
    source = "fn make(p: Pair) -> Holder { todo!() }\n"
    data = source.encode("utf-8")
    targets = find_targets(parse_source(data), data=data, text=source, strategy=TYPENAME)
    assert [t.span_bytes(data) for t in targets] == [b"Pair", b"Holder"]


def test_source_is_left_untouched():
    source = "struct A;\nstruct B(u8);\n"
    snapshot = str(source)
    variants = crush_source(source, strategy=STRUCT)
    assert source == snapshot
    assert all(v != source for v in variants)


def test_enumeration_order_is_target_then_replacement():
    text = "abcdef"
    targets = [
        Target(start_byte=4, end_byte=5, kind="fixed"),
        Target(start_byte=0, end_byte=1, kind="fixed"),
    ]
    variants = list(enumerate_variants(text=text, targets=targets, strategy=_fixed_strategy("X", "Y")))
    assert [v.text for v in variants] == ["abcdXf", "abcdYf", "Xbcdef", "Ybcdef"]
    assert [v.index_in_file for v in variants] == [0, 1, 2, 3]


def test_identical_variants_are_not_deduplicated():
    targets = [Target(start_byte=0, end_byte=1, kind="fixed")]
    variants = list(enumerate_variants(text="ab", targets=targets, strategy=_fixed_strategy("Z", "Z")))
    assert [v.text for v in variants] == ["Zb", "Zb"]


def test_splice_does_not_modify_buffer():
    data = b"struct A;"
    target = Target(start_byte=7, end_byte=8, kind="fixed")
    assert splice(data, target, "Longer") == "struct Longer;"
    assert data == b"struct A;"


def test_parse_failure_propagates():
    def failing_parse(data):
        raise ParseError("no tree", path="broken.rs")

    with pytest.raises(ParseError, match="broken.rs: no tree"):
        crush_source("struct A;", strategy=STRUCT, parse=failing_parse)


def test_source_with_syntax_errors_is_still_crushed():
    variants = crush_source("struct A;\nfn (\n", strategy=STRUCT)
    assert variants[0].startswith("struct A();")
