from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Single stream handler on the root logger; safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_wall_area", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wall_area = True  # type: ignore[attr-defined]
        root.addHandler(handler)
