"""Configuration helpers for the course layout and fact thresholds."""

from .course import (
    COURSE_PAR,
    DEFAULT_STROKE_INDICES,
    HOLES_PER_ROUND,
    stroke_indices,
    validate_stroke_indices,
)
from .thresholds import DEFAULT_THRESHOLDS, FactThresholds

__all__ = [
    "COURSE_PAR",
    "DEFAULT_STROKE_INDICES",
    "DEFAULT_THRESHOLDS",
    "FactThresholds",
    "HOLES_PER_ROUND",
    "stroke_indices",
    "validate_stroke_indices",
]
