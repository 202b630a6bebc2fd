# cli/app.py
# CLI = terminal version of the form. It only collects text and shows results;
# all checks and arithmetic live in core.

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from core.calculator import calculate
from core.config import Settings, get_settings
from core.log import configure_logging
from core.models import CalculationInput, CalculationOutcome, CalculationResult
from core.rules import DEFAULT_WALL_HEIGHT
from core.state import (
    add_opening,
    add_segment,
    default_state,
    remove_opening,
    set_opening,
    set_segment_length,
    set_wall_height,
)

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Out = Callable[[str], None]


# ---------- INPUT HELPERS ----------

def ask_yes_no(prompt: str, ask: Ask = input, out: Out = print) -> bool:
    """Ask until the answer is y or n."""
    while True:
        raw = ask(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        out("❌ Enter y or n")


def format_area(x: float) -> str:
    return f"{x:,.2f} square meters"


def collect_form(ask: Ask = input) -> CalculationInput:
    """
    Fill the default form row by row. Blank wall height keeps the default,
    a blank length or width ends that list. Text is passed to core as typed.
    """
    state = default_state()

    height = ask(f"Wall height (meters) [{DEFAULT_WALL_HEIGHT}]: ").strip()
    if height:
        state = set_wall_height(state, height)

    # first row already exists in the default form
    first_segment = state.wall.segments[0].id
    i = 1
    while True:
        raw = ask(f"Wall {i} length (meters, Enter to finish): ").strip()
        if not raw:
            break
        if i == 1:
            state = set_segment_length(state, first_segment, raw)
        else:
            state = add_segment(state, raw)
        i += 1

    first_opening = state.openings[0].id
    i = 1
    while True:
        width = ask(f"Opening {i} width (meters, Enter to finish): ").strip()
        if not width:
            break
        height = ask(f"Opening {i} height (meters): ").strip()
        if i == 1:
            state = set_opening(state, first_opening, width=width, height=height)
        else:
            state = add_opening(state, width, height)
        i += 1

    if i == 1:
        # no doors or windows
        state = remove_opening(state, first_opening)

    return state


# ---------- HISTORY (JSON) ----------

def save_calculation_json(form: CalculationInput, result: CalculationResult, history_dir: Path) -> Path:
    """Write one calculation to history_dir and return the file path."""
    history_dir.mkdir(parents=True, exist_ok=True)

    created_at = datetime.now().isoformat(timespec="seconds")
    payload = {
        "meta": {"created_at": created_at},
        "input": form.model_dump(mode="json"),
        "output": result.model_dump(mode="json"),
    }

    ts = created_at.replace(":", "").replace("-", "")
    path = history_dir / f"{ts}_wall_area.json"
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


# ---------- MAIN CLI FLOW ----------

def print_breakdown(result: CalculationResult, out: Out = print) -> None:
    out("\n--- Breakdown ---")
    out(f"Total wall length:     {result.total_wall_length:,.2f} m")
    out(f"Gross area:            {format_area(result.gross_area)}")
    out(f"Doors and windows:     {format_area(result.total_opening_area)}")
    out(f"NET AREA:              {format_area(result.net_area)}")

    if result.notes:
        out("\nNotes:")
        for n in result.notes:
            out(f" - {n}")

    out("-----------------\n")


def run_cli(ask: Ask = input, out: Out = print, settings: Optional[Settings] = None) -> CalculationOutcome:
    settings = settings or get_settings()
    out("\n=== Wall Area Calculator (CLI) ===\n")

    form = collect_form(ask)
    outcome = calculate(form, check_opening_widths=settings.check_opening_widths)

    if outcome.errors:
        out("\n❌ Please fix the following:")
        for e in outcome.errors:
            out(f" - {e.path}: {e.message}")
        return outcome

    print_breakdown(outcome.result, out)

    if ask_yes_no("Save calculation to history (JSON)?", ask, out):
        path = save_calculation_json(form, outcome.result, settings.history_dir)
        logger.info("saved calculation to %s", path)
        out(f"✅ Saved JSON: {path}\n")

    return outcome


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    run_cli(settings=settings)


if __name__ == "__main__":
    main()
