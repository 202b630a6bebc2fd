from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from core.calculator import calculate
from core.config import get_settings
from core.models import CalculationInput, CalculationResult, OpeningRow, SegmentRow, WallInput
from core.state import default_state, is_dirty

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title="Wall Area Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DirtyRequest(BaseModel):
    current: CalculationInput
    baseline: Optional[CalculationInput] = None


def _run(req: CalculationInput) -> CalculationResult:
    outcome = calculate(req, check_opening_widths=get_settings().check_opening_widths)
    if outcome.errors:
        logger.info("calculation rejected: %s", ", ".join(e.path for e in outcome.errors))
        raise HTTPException(
            status_code=422,
            detail=[e.model_dump(mode="json") | {"path": e.path} for e in outcome.errors],
        )
    return outcome.result


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/defaults", response_model=CalculationInput)
def defaults() -> CalculationInput:
    return default_state()


@app.post("/calculate", response_model=CalculationResult)
def calculate_area(req: CalculationInput = Body(...)) -> CalculationResult:
    """
    Main endpoint: the whole form as typed (strings per field).
    422 with every field error when the form does not validate.
    """
    return _run(req)


@app.post("/dirty")
def dirty(req: DirtyRequest) -> dict[str, bool]:
    return {"dirty": is_dirty(req.current, req.baseline)}


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def input_from_payload(payload: dict[str, Any]) -> CalculationInput:
    """
    Map the flat form payload (wallHeight / wallLengths[].length /
    openings[].width,height) onto CalculationInput. Numbers are accepted as
    well as strings.
    """
    segments = tuple(
        SegmentRow(length=_text(row.get("length"))) for row in payload.get("wallLengths") or []
    )
    openings = tuple(
        OpeningRow(width=_text(row.get("width")), height=_text(row.get("height")))
        for row in payload.get("openings") or []
    )
    return CalculationInput(
        wall=WallInput(height=_text(payload.get("wallHeight")), segments=segments),
        openings=openings,
    )


@app.post("/calculate_from_payload", response_model=CalculationResult)
def calculate_from_payload(payload: dict[str, Any] = Body(...)) -> CalculationResult:
    try:
        req = input_from_payload(payload)
    except (AttributeError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid payload: {e}")
    return _run(req)
