from __future__ import annotations

import logging

from .models import CalculationInput, CalculationOutcome, CalculationResult, ValidatedInput
from .rules import NOTE_NEGATIVE_AREA, gross_area
from .validation import validate

logger = logging.getLogger(__name__)


def compute_area(inp: ValidatedInput) -> CalculationResult:
    notes: list[str] = []

    total_length = inp.wall.total_length
    gross = gross_area(total_length, inp.wall.height)
    openings_area = sum(o.area for o in inp.openings)

    # no rounding here, display formatting belongs to the UI
    net = gross - openings_area

    if net < 0:
        notes.append(NOTE_NEGATIVE_AREA)

    return CalculationResult(
        total_wall_length=total_length,
        gross_area=gross,
        total_opening_area=openings_area,
        net_area=net,
        notes=notes,
    )


def calculate(inp: CalculationInput, *, check_opening_widths: bool = False) -> CalculationOutcome:
    """Validate the form and, when it is clean, compute the net wall area."""
    logger.debug(
        "calculate: %d segment(s), %d opening(s)", len(inp.wall.segments), len(inp.openings)
    )

    validated, errors = validate(inp, check_opening_widths=check_opening_widths)
    if errors:
        return CalculationOutcome(errors=errors)

    result = compute_area(validated)
    logger.debug("net area %.4f", result.net_area)
    return CalculationOutcome(result=result)
