# core/parsing.py
# Text -> positive float for the numeric form fields.

from __future__ import annotations

import math
import re
from typing import Optional

from .models import FieldError, FieldPath
from .rules import MSG_INVALID_NUMBER

# optional sign, digits with an optional fraction, optional exponent.
# "inf", "nan", hex literals and thousands separators do not match.
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def normalize_number_text(raw: str) -> str:
    """Strip whitespace and accept a comma as the decimal separator ("2,5" -> "2.5")."""
    text = raw.strip()
    if text.count(",") == 1 and "." not in text:
        text = text.replace(",", ".")
    return text


def parse_positive_float(
    raw: str,
    path: FieldPath,
    row_id: Optional[str] = None,
) -> tuple[Optional[float], Optional[FieldError]]:
    """
    Parse one field. Returns (value, None) on success and (None, error) otherwise;
    never raises, so the caller can keep checking the other fields.
    """
    text = normalize_number_text(raw)

    value = float(text) if _FLOAT_RE.match(text) else None

    if value is None or not math.isfinite(value) or value <= 0:
        return None, FieldError(field_path=path, message=MSG_INVALID_NUMBER, kind="parse", row_id=row_id)

    return value, None
