from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class FactsResponse(BaseModel):
    facts: List[str]


class CourseResponse(BaseModel):
    holes: int
    par: int
    stroke_indices: List[int] = Field(default_factory=list)


class ThresholdsResponse(BaseModel):
    blow_up_strokes: int
    grind_streak: int
    upset_handicap_gap: int
