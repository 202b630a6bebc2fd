"""Shared helpers for building forms."""

from core.models import CalculationInput, OpeningRow, SegmentRow, WallInput


def make_form(height="2.7", lengths=("5",), openings=()):
    return CalculationInput(
        wall=WallInput(height=height, segments=tuple(SegmentRow(length=x) for x in lengths)),
        openings=tuple(OpeningRow(width=w, height=h) for w, h in openings),
    )
