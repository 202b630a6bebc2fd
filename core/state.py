# core/state.py
# Default form state, reset and dirty tracking, plus add/remove of repeated rows.
# Every operation returns a new CalculationInput; nothing is mutated in place.

from __future__ import annotations

from typing import Optional

from .models import CalculationInput, OpeningRow, SegmentRow, WallInput
from .rules import DEFAULT_WALL_HEIGHT


def default_state() -> CalculationInput:
    """Canonical untouched form: height 2.7, one blank segment, one blank opening."""
    return CalculationInput(
        wall=WallInput(height=DEFAULT_WALL_HEIGHT, segments=(SegmentRow(),)),
        openings=(OpeningRow(),),
    )


def reset() -> CalculationInput:
    return default_state()


def _values(state: CalculationInput) -> tuple:
    # row ids are identity, not value
    return (
        state.wall.height,
        tuple(s.length for s in state.wall.segments),
        tuple((o.width, o.height) for o in state.openings),
    )


def is_dirty(current: CalculationInput, baseline: Optional[CalculationInput] = None) -> bool:
    """True when any field value, the segment count or the opening count differs."""
    if baseline is None:
        baseline = default_state()
    return _values(current) != _values(baseline)


# ---------- wall ----------

def set_wall_height(state: CalculationInput, text: str) -> CalculationInput:
    return state.model_copy(update={"wall": state.wall.model_copy(update={"height": text})})


def _with_segments(state: CalculationInput, segments: tuple[SegmentRow, ...]) -> CalculationInput:
    return state.model_copy(update={"wall": state.wall.model_copy(update={"segments": segments})})


def add_segment(state: CalculationInput, length: str = "") -> CalculationInput:
    return _with_segments(state, state.wall.segments + (SegmentRow(length=length),))


def set_segment_length(state: CalculationInput, row_id: str, text: str) -> CalculationInput:
    _index_of(state.wall.segments, row_id)
    segments = tuple(
        s.model_copy(update={"length": text}) if s.id == row_id else s for s in state.wall.segments
    )
    return _with_segments(state, segments)


def remove_segment(state: CalculationInput, row_id: str) -> CalculationInput:
    i = _index_of(state.wall.segments, row_id)
    return _with_segments(state, state.wall.segments[:i] + state.wall.segments[i + 1:])


# ---------- openings ----------

def add_opening(state: CalculationInput, width: str = "", height: str = "") -> CalculationInput:
    return state.model_copy(update={"openings": state.openings + (OpeningRow(width=width, height=height),)})


def set_opening(
    state: CalculationInput,
    row_id: str,
    *,
    width: Optional[str] = None,
    height: Optional[str] = None,
) -> CalculationInput:
    """Change the width and/or height of one opening; None leaves a field as is."""
    _index_of(state.openings, row_id)
    update: dict[str, str] = {}
    if width is not None:
        update["width"] = width
    if height is not None:
        update["height"] = height

    openings = tuple(o.model_copy(update=update) if o.id == row_id else o for o in state.openings)
    return state.model_copy(update={"openings": openings})


def remove_opening(state: CalculationInput, row_id: str) -> CalculationInput:
    i = _index_of(state.openings, row_id)
    return state.model_copy(update={"openings": state.openings[:i] + state.openings[i + 1:]})


def _index_of(rows: tuple, row_id: str) -> int:
    for i, row in enumerate(rows):
        if row.id == row_id:
            return i
    raise KeyError(row_id)
