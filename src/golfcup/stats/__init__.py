"""Highlight detectors that turn a tournament snapshot into fun facts."""

from .facts import (
    DETECTORS,
    NOT_ENOUGH_DATA,
    NOTHING_NOTABLE,
    find_birdies,
    find_grind_matches,
    find_hole_in_ones,
    find_low_tier_pars,
    find_most_strokes_on_hole,
    find_upset_alerts,
    generate_facts,
    longest_tied_streak,
)

__all__ = [
    "DETECTORS",
    "NOT_ENOUGH_DATA",
    "NOTHING_NOTABLE",
    "find_birdies",
    "find_grind_matches",
    "find_hole_in_ones",
    "find_low_tier_pars",
    "find_most_strokes_on_hole",
    "find_upset_alerts",
    "generate_facts",
    "longest_tied_streak",
]
