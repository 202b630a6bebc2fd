from __future__ import annotations

from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat

from .rules import DEFAULT_WALL_HEIGHT

ErrorKind = Literal["parse", "structural", "cross_field"]
FieldPath = tuple[str | int, ...]


def new_row_id() -> str:
    return uuid4().hex


# ---- raw form state (strings as typed by the user) ----

class SegmentRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_row_id)
    length: str = ""


class OpeningRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_row_id)
    width: str = ""
    height: str = ""


class WallInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    height: str = DEFAULT_WALL_HEIGHT
    segments: tuple[SegmentRow, ...] = ()


class CalculationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    wall: WallInput = Field(default_factory=WallInput)
    openings: tuple[OpeningRow, ...] = ()


# ---- parsed values (only built once every field is valid) ----

class WallSpec(BaseModel):
    height: PositiveFloat
    segments: list[PositiveFloat] = Field(min_length=1)

    @property
    def total_length(self) -> float:
        return sum(self.segments)


class Opening(BaseModel):
    width: PositiveFloat
    height: PositiveFloat

    @property
    def area(self) -> float:
        return self.width * self.height


class ValidatedInput(BaseModel):
    wall: WallSpec
    openings: list[Opening] = []


# ---- outputs ----

class CalculationResult(BaseModel):
    total_wall_length: float
    gross_area: float
    total_opening_area: float
    net_area: float

    notes: list[str] = []


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_path: FieldPath
    message: str
    kind: ErrorKind
    # id of the form row the field belongs to (None for wall height / collections)
    row_id: Optional[str] = None

    @property
    def path(self) -> str:
        return ".".join(str(p) for p in self.field_path)


class CalculationOutcome(BaseModel):
    result: Optional[CalculationResult] = None
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return self.result is not None and not self.errors
