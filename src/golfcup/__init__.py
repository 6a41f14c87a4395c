"""Golf tournament scoring: handicap-adjusted match play, roll-ups and fun facts."""

__version__ = "0.1.0"
