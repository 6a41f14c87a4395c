"""Pydantic models for API I/O."""

from .responses import CourseResponse, FactsResponse, ThresholdsResponse

__all__ = [
    "CourseResponse",
    "FactsResponse",
    "ThresholdsResponse",
]
