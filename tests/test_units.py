"""Tests unités et valeurs — formatage Typst, parsing des chaînes, rejets."""
import pytest
from pydantic import TypeAdapter, ValidationError

from typst_builder.core.units import (
    AUTO,
    Auto,
    Fraction,
    Length,
    Ratio,
    TrackSize,
    cm,
    em,
    fr,
    inches,
    mm,
    percent,
    pt,
)
from typst_builder.core.values import Pattern, format_decimal, typst_array, typst_bool, typst_content, typst_string, typst_value


# ── Formatage ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value,expected", [
    (pt(12), "12.0pt"),
    (pt(10.5), "10.5pt"),
    (mm(5), "5.0mm"),
    (cm(2.5), "2.5cm"),
    (inches(1), "1.0in"),
    (em(0.65), "0.65em"),
    (fr(1), "1.0fr"),
    (percent(50), "50.0%"),
    (AUTO, "auto"),
])
def test_to_typst(value, expected):
    assert value.to_typst() == expected


@pytest.mark.parametrize("value,expected", [
    (pt(1e16), "10000000000000000.0pt"),
    (pt(1e-7), "0.0000001pt"),
    (fr(2e-5), "0.00002fr"),
    (percent(1e20), "100000000000000000000.0%"),
])
def test_extreme_magnitudes_stay_decimal(value, expected):
    assert value.to_typst() == expected


def test_format_decimal():
    assert format_decimal(12) == "12.0"
    assert format_decimal(0.65) == "0.65"
    assert format_decimal(-3) == "-3.0"
    assert format_decimal(1e16) == "10000000000000000.0"
    assert format_decimal(1.5e-7) == "0.00000015"


def test_negative_length():
    assert pt(-3).to_typst() == "-3.0pt"


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_rejected(bad):
    with pytest.raises(ValidationError):
        pt(bad)
    with pytest.raises(ValidationError):
        fr(bad)


def test_unknown_unit_rejected():
    with pytest.raises(ValidationError):
        Length(value=1, unit="px")


# ── Parsing chaînes (manifest) ───────────────────────────────────────────────

def test_length_from_string():
    assert Length.model_validate("12pt") == pt(12)
    assert Length.model_validate(" 1.5em ") == em(1.5)


def test_fraction_and_ratio_from_string():
    assert Fraction.model_validate("2fr") == fr(2)
    assert Ratio.model_validate("25%") == percent(25)


def test_invalid_string_rejected():
    with pytest.raises(ValidationError):
        Length.model_validate("12")
    with pytest.raises(ValidationError):
        Fraction.model_validate("1pt")


def test_track_size_union():
    adapter = TypeAdapter(TrackSize)
    assert adapter.validate_python("auto") == AUTO
    assert adapter.validate_python("1fr") == fr(1)
    assert adapter.validate_python("3cm") == cm(3)
    assert adapter.validate_python("10%") == percent(10)
    assert isinstance(adapter.validate_python("auto"), Auto)


def test_units_are_frozen():
    length = pt(1)
    with pytest.raises(ValidationError):
        length.value = 2


# ── Valeurs ──────────────────────────────────────────────────────────────────

def test_typst_string_escapes():
    assert typst_string("1.a.") == '"1.a."'
    assert typst_string('say "hi"') == '"say \\"hi\\""'
    assert typst_string("a\\b") == '"a\\\\b"'


def test_typst_bool_and_content():
    assert typst_bool(True) == "true"
    assert typst_bool(False) == "false"
    assert typst_content("--") == "[--]"


def test_typst_array():
    assert typst_array([fr(1), fr(2)]) == "(1.0fr, 2.0fr)"
    assert typst_array([AUTO]) == "(auto,)"
    assert typst_array([]) == "()"


def test_typst_value_dispatch():
    assert typst_value(None) == "none"
    assert typst_value(True) == "true"
    assert typst_value(3) == "3"
    assert typst_value(1.5) == "1.5"
    assert typst_value(1e-7) == "0.0000001"
    assert typst_value("x") == '"x"'
    assert typst_value(pt(2)) == "2.0pt"
    assert typst_value([1, 2]) == "(1, 2)"
    with pytest.raises(TypeError):
        typst_value(object())


def test_pattern():
    assert Pattern("1.a.").to_typst() == '"1.a."'
    assert Pattern.model_validate("I.") == Pattern("I.")
