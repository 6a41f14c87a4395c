"""Course layout for the fixed par-3 course the tournament is played on."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Sequence, Tuple


logger = logging.getLogger(__name__)

HOLES_PER_ROUND = 18
COURSE_PAR = 3

_STROKE_INDICES_ENV = "GOLFCUP_STROKE_INDICES"

DEFAULT_STROKE_INDICES: Tuple[int, ...] = (
    3, 7, 13, 15, 11, 5, 17, 1, 9, 6, 2, 14, 18, 8, 10, 16, 4, 12,
)


def validate_stroke_indices(indices: Iterable[int]) -> Tuple[int, ...]:
    """Return ``indices`` as a tuple, raising ValueError unless it ranks holes 1..18."""

    values = tuple(indices)
    if len(values) != HOLES_PER_ROUND:
        raise ValueError(
            f"Expected {HOLES_PER_ROUND} stroke indices, got {len(values)}"
        )
    if sorted(values) != list(range(1, HOLES_PER_ROUND + 1)):
        duplicates = sorted({v for v in values if values.count(v) > 1})
        detail = f" (duplicates: {duplicates})" if duplicates else ""
        raise ValueError(
            f"Stroke indices must be a permutation of 1..{HOLES_PER_ROUND}{detail}"
        )
    return values


def _parse_indices(raw: str) -> Sequence[int]:
    return [int(part) for part in raw.replace(" ", "").split(",") if part]


def stroke_indices() -> Tuple[int, ...]:
    """Configured stroke-index table, honouring ``GOLFCUP_STROKE_INDICES``."""

    raw = os.getenv(_STROKE_INDICES_ENV)
    if not raw:
        return DEFAULT_STROKE_INDICES
    try:
        return validate_stroke_indices(_parse_indices(raw))
    except ValueError as exc:
        logger.warning("Invalid %s=%r (%s); using default table", _STROKE_INDICES_ENV, raw, exc)
        return DEFAULT_STROKE_INDICES
