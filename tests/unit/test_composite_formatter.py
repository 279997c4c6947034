from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from logvalues.composite import (
    CompositeFormatter,
    accepts_format,
    align,
    format_composite,
    format_invariant,
)
from logvalues.errors import TemplateFormatError


class _Opaque:
    def __str__(self) -> str:
        return "opaque"


@pytest.mark.unit
def test_positional_items_and_escaped_braces():
    assert format_composite("{0} + {1} = {2}", [1, 2, 3]) == "1 + 2 = 3"
    assert format_composite("{{0}}", []) == "{0}"
    assert format_composite("{{{0}}}", ["v"]) == "{v}"
    assert format_composite("{1}{0}", ["a", "b"]) == "ba"


@pytest.mark.unit
def test_alignment_pads_after_formatting():
    assert format_composite("{0,5:D2}", [7]) == "   07"
    assert format_composite("[{0,-6}]", ["ab"]) == "[ab    ]"
    assert format_composite("{ 0 , 3 }", [1]) == "  1"
    assert align("abcdef", 3) == "abcdef"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("D3", -5, "-005"),
        ("D", 42, "42"),
        ("X4", 255, "00FF"),
        ("x", 255, "ff"),
        ("N2", 1234.5, "1,234.50"),
        ("N", 1000000, "1,000,000.00"),
        ("N1", Decimal("1234.56"), "1,234.6"),
        ("F", 3.14159, "3.14"),
        ("F0", 2.4, "2"),
        ("P1", 0.125, "12.5 %"),
        ("E2", 1500.0, "1.50E+003"),
        ("e", 1500.0, "1.500000e+003"),
        ("G", 2.5, "2.5"),
        ("G3", 3.14159, "3.14"),
    ],
)
def test_standard_numeric_format_strings(spec, value, expected):
    assert format_invariant(value, spec) == expected


@pytest.mark.unit
def test_other_format_strings_use_the_format_protocol():
    assert format_invariant(2.5, ".3f") == "2.500"
    assert format_invariant(datetime(2024, 1, 2, 3, 4, 5), "%Y-%m-%d") == "2024-01-02"
    assert format_composite("{0:%H:%M}", [datetime(2024, 1, 2, 3, 4, 5)]) == "03:04"


@pytest.mark.unit
def test_values_without_format_support_ignore_the_format_string():
    assert not accepts_format("text")
    assert not accepts_format(True)
    assert not accepts_format(_Opaque())
    assert accepts_format(3)
    assert format_composite("{0:D2}", ["(null)"]) == "(null)"
    assert format_composite("{0:D2}", [True]) == "True"
    assert format_composite("{0:X}", [_Opaque()]) == "opaque"


@pytest.mark.unit
def test_empty_format_string_uses_str():
    assert format_invariant(0.1, "") == "0.1"
    assert format_invariant(None, "") == "None"


@pytest.mark.unit
def test_missing_argument_raises():
    with pytest.raises(TemplateFormatError) as excinfo:
        format_composite("{0} {1}", ["a"])
    assert excinfo.value.index == 1
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "canonical",
    ["{0}}", "{0", "x } y", "{a}", "{-1}", "{0!r}", "{0:{1}}", "{0,}", "{0.real}"],
)
def test_malformed_canonical_text_raises(canonical):
    with pytest.raises(TemplateFormatError):
        format_composite(canonical, [1, 2])


@pytest.mark.unit
def test_rejected_format_string_raises():
    with pytest.raises(TemplateFormatError):
        format_composite("{0:D2}", [1.5])
    with pytest.raises(TemplateFormatError):
        format_composite("{0:Q}", [1])


@pytest.mark.unit
def test_formatter_is_a_string_formatter():
    formatter = CompositeFormatter()
    assert formatter.format("{0,4}|{1,-4}|", "a", "b") == "   a|b   |"
