"""CSV export of a tournament's progress timeline."""

from __future__ import annotations

import csv
from io import StringIO

from golfcup.models import Tournament


PROGRESS_HEADERS: tuple[str, ...] = (
    "timestamp",
    "raw_usa",
    "raw_europe",
    "adjusted_usa",
    "adjusted_europe",
    "projected_raw_usa",
    "projected_raw_europe",
    "projected_adjusted_usa",
    "projected_adjusted_europe",
    "completed_games",
)


def export_progress_csv(tournament: Tournament) -> str:
    """One row per progress snapshot, oldest first."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(PROGRESS_HEADERS)
    for entry in tournament.progress:
        writer.writerow([
            entry.timestamp.isoformat(),
            entry.score.raw.usa,
            entry.score.raw.europe,
            entry.score.adjusted.usa,
            entry.score.adjusted.europe,
            entry.projected_score.raw.usa,
            entry.projected_score.raw.europe,
            entry.projected_score.adjusted.usa,
            entry.projected_score.adjusted.europe,
            entry.completed_games,
        ])
    return buffer.getvalue()


__all__ = [
    "PROGRESS_HEADERS",
    "export_progress_csv",
]
