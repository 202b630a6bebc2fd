import pytest

from core.parsing import normalize_number_text, parse_positive_float
from core.rules import MSG_INVALID_NUMBER


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2.7", 2.7),
        ("  5 ", 5.0),
        ("2,5", 2.5),
        (".5", 0.5),
        ("3.", 3.0),
        ("+4", 4.0),
        ("1e2", 100.0),
    ],
)
def test_accepts_positive_numbers(raw, expected):
    value, err = parse_positive_float(raw, ("wall", "height"))
    assert err is None
    assert value == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "   ", "abc", "0", "-1", "0.0", "inf", "nan", "1e999", "1,000.5", "0x10", "."])
def test_rejects_invalid_or_non_positive(raw):
    value, err = parse_positive_float(raw, ("openings", 0, "width"), "row-1")
    assert value is None
    assert err.kind == "parse"
    assert err.message == MSG_INVALID_NUMBER
    assert err.field_path == ("openings", 0, "width")
    assert err.row_id == "row-1"
    assert err.path == "openings.0.width"


def test_normalize_leaves_dotted_text_alone():
    assert normalize_number_text(" 1.5 ") == "1.5"
    assert normalize_number_text("1,5") == "1.5"
    assert normalize_number_text("1,5,0") == "1,5,0"
