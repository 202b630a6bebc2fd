# core/rules.py
# Defaults and messages shared by the parser, the validator and the form state.

from __future__ import annotations

DEFAULT_WALL_HEIGHT = "2.7"

MSG_INVALID_NUMBER = "Must be a valid number."
MSG_NO_SEGMENTS = "At least one wall length is required."
MSG_OPENING_TOO_TALL = "Opening height cannot be greater than height of the wall."
MSG_OPENINGS_TOO_WIDE = "Total width of openings cannot be greater than total length of the wall."

NOTE_NEGATIVE_AREA = "Openings exceed the gross wall area."


def gross_area(total_length: float, height: float) -> float:
    """Wall area before openings are taken out."""
    return total_length * height
