from core.rules import MSG_NO_SEGMENTS, MSG_OPENING_TOO_TALL, MSG_OPENINGS_TOO_WIDE
from core.validation import validate

from conftest import make_form


def test_valid_form_is_parsed():
    validated, errors = validate(make_form("3", ["4", "2"], [("1", "2")]))
    assert errors == []
    assert validated.wall.height == 3.0
    assert validated.wall.segments == [4.0, 2.0]
    assert validated.openings[0].width == 1.0
    assert validated.openings[0].height == 2.0


def test_empty_segments_is_structural_error():
    validated, errors = validate(make_form("3", []))
    assert validated is None
    assert len(errors) == 1
    assert errors[0].kind == "structural"
    assert errors[0].field_path == ("wall", "segments")
    assert errors[0].message == MSG_NO_SEGMENTS
    assert errors[0].row_id is None


def test_opening_taller_than_wall():
    form = make_form("2", ["4"], [("1", "3")])
    validated, errors = validate(form)
    assert validated is None
    assert len(errors) == 1
    assert errors[0].kind == "cross_field"
    assert errors[0].path == "openings.0.height"
    assert errors[0].message == MSG_OPENING_TOO_TALL
    assert errors[0].row_id == form.openings[0].id


def test_opening_as_tall_as_wall_is_fine():
    _, errors = validate(make_form("2", ["4"], [("1", "2")]))
    assert errors == []


def test_all_errors_are_collected():
    form = make_form("x", ["5", "", "-2"], [("", "1"), ("1", "abc")])
    _, errors = validate(form)
    assert [e.path for e in errors] == [
        "wall.height",
        "wall.segments.1.length",
        "wall.segments.2.length",
        "openings.0.width",
        "openings.1.height",
    ]
    assert all(e.kind == "parse" for e in errors)


def test_no_height_comparison_when_wall_height_invalid():
    _, errors = validate(make_form("", ["4"], [("1", "30")]))
    assert [e.path for e in errors] == ["wall.height"]


def test_cross_field_error_next_to_parse_errors():
    _, errors = validate(make_form("2", ["4", "oops"], [("1", "3")]))
    assert [(e.path, e.kind) for e in errors] == [
        ("wall.segments.1.length", "parse"),
        ("openings.0.height", "cross_field"),
    ]


def test_opening_widths_not_checked_by_default():
    validated, errors = validate(make_form("2", ["1"], [("3", "1")]))
    assert errors == []
    assert validated is not None


def test_opening_widths_check_when_enabled():
    _, errors = validate(make_form("2", ["1"], [("3", "1")]), check_opening_widths=True)
    assert len(errors) == 1
    assert errors[0].field_path == ("openings",)
    assert errors[0].kind == "structural"
    assert errors[0].message == MSG_OPENINGS_TOO_WIDE


def test_opening_widths_within_length_pass_when_enabled():
    _, errors = validate(make_form("2", ["2", "2"], [("3", "1")]), check_opening_widths=True)
    assert errors == []
