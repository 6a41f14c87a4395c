"""Tunable thresholds for the tournament fun-facts feed."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_BLOW_UP_ENV = "GOLFCUP_BLOW_UP_STROKES"
_GRIND_STREAK_ENV = "GOLFCUP_GRIND_STREAK"
_UPSET_GAP_ENV = "GOLFCUP_UPSET_GAP"

BLOW_UP_STROKES_DEFAULT = 6
GRIND_STREAK_DEFAULT = 3
UPSET_HANDICAP_GAP_DEFAULT = 3


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class FactThresholds:
    """Cut-offs deciding when a pattern is worth reporting.

    Earlier seasons ran with a 7-stroke blow-up and a 4-hole grind streak;
    override here rather than editing the detectors.
    """

    blow_up_strokes: int = BLOW_UP_STROKES_DEFAULT
    grind_streak: int = GRIND_STREAK_DEFAULT
    upset_handicap_gap: int = UPSET_HANDICAP_GAP_DEFAULT

    @classmethod
    def from_env(cls) -> "FactThresholds":
        return cls(
            blow_up_strokes=_env_int(_BLOW_UP_ENV, BLOW_UP_STROKES_DEFAULT, min_value=1),
            grind_streak=_env_int(_GRIND_STREAK_ENV, GRIND_STREAK_DEFAULT, min_value=1),
            upset_handicap_gap=_env_int(_UPSET_GAP_ENV, UPSET_HANDICAP_GAP_DEFAULT, min_value=0),
        )


DEFAULT_THRESHOLDS = FactThresholds()
