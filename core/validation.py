# core/validation.py
# Runs every field and cross-field check and collects all the errors at once.

from __future__ import annotations

import logging
from typing import Optional

from .models import CalculationInput, FieldError, Opening, ValidatedInput, WallSpec
from .parsing import parse_positive_float
from .rules import MSG_NO_SEGMENTS, MSG_OPENING_TOO_TALL, MSG_OPENINGS_TOO_WIDE

logger = logging.getLogger(__name__)


def validate(
    inp: CalculationInput,
    *,
    check_opening_widths: bool = False,
) -> tuple[Optional[ValidatedInput], list[FieldError]]:
    """
    Parse and check the whole form. Never stops at the first failure: the
    presentation layer shows every invalid field together.

    `check_opening_widths` turns on the total opening width vs. total wall
    length check, which is off unless configured.
    """
    errors: list[FieldError] = []

    wall_height, err = parse_positive_float(inp.wall.height, ("wall", "height"))
    if err:
        errors.append(err)

    # --- wall segments ---
    lengths: list[float] = []
    if not inp.wall.segments:
        errors.append(FieldError(field_path=("wall", "segments"), message=MSG_NO_SEGMENTS, kind="structural"))

    for i, row in enumerate(inp.wall.segments):
        value, err = parse_positive_float(row.length, ("wall", "segments", i, "length"), row.id)
        if err:
            errors.append(err)
        else:
            lengths.append(value)

    # --- openings ---
    openings: list[Opening] = []
    for i, row in enumerate(inp.openings):
        width, width_err = parse_positive_float(row.width, ("openings", i, "width"), row.id)
        height, height_err = parse_positive_float(row.height, ("openings", i, "height"), row.id)

        if width_err:
            errors.append(width_err)
        if height_err:
            errors.append(height_err)
        elif wall_height is not None and height > wall_height:
            errors.append(
                FieldError(
                    field_path=("openings", i, "height"),
                    message=MSG_OPENING_TOO_TALL,
                    kind="cross_field",
                    row_id=row.id,
                )
            )

        if width is not None and height is not None:
            openings.append(Opening(width=width, height=height))

    if check_opening_widths and lengths and len(lengths) == len(inp.wall.segments) \
            and len(openings) == len(inp.openings):
        if sum(o.width for o in openings) > sum(lengths):
            errors.append(FieldError(field_path=("openings",), message=MSG_OPENINGS_TOO_WIDE, kind="structural"))

    if errors:
        logger.debug("validation failed with %d error(s)", len(errors))
        return None, errors

    return ValidatedInput(wall=WallSpec(height=wall_height, segments=lengths), openings=openings), []
