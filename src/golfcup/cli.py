"""Command-line interface for recomputing a tournament snapshot."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from golfcup.config import FactThresholds
from golfcup.ingest import SnapshotError, load_snapshot, save_snapshot
from golfcup.report import export_progress_csv
from golfcup.scoring import recompute_game, recompute_tournament
from golfcup.stats import generate_facts


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recompute golf tournament scores from a snapshot")
    parser.add_argument("snapshot", type=Path, help="Path to tournament snapshot JSON")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the recomputed snapshot JSON here",
    )
    parser.add_argument("--facts", action="store_true", help="Print the fun-facts feed")
    parser.add_argument(
        "--progress-csv",
        type=Path,
        default=None,
        help="Optional path to write the progress timeline CSV",
    )
    parser.add_argument(
        "--blow-up-strokes",
        type=int,
        default=None,
        help="Strokes on one hole that count as a blow-up (default from env or 6)",
    )
    parser.add_argument(
        "--grind-streak",
        type=int,
        default=None,
        help="Consecutive tied holes that count as a grind match (default from env or 3)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _thresholds(args: argparse.Namespace) -> FactThresholds:
    base = FactThresholds.from_env()
    return FactThresholds(
        blow_up_strokes=args.blow_up_strokes if args.blow_up_strokes is not None else base.blow_up_strokes,
        grind_streak=args.grind_streak if args.grind_streak is not None else base.grind_streak,
        upset_handicap_gap=base.upset_handicap_gap,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        snapshot = load_snapshot(args.snapshot)
    except SnapshotError as exc:
        raise SystemExit(f"Could not load snapshot: {exc}") from exc

    if snapshot.tournament is not None:
        update = recompute_tournament(snapshot.tournament, snapshot.games)
        snapshot = snapshot.model_copy(update={"tournament": update.tournament, "games": update.games})
        totals = update.tournament.total_score
        projected = update.tournament.projected_score
        print(f"Holes won (raw): USA {totals.raw.usa} - EUROPE {totals.raw.europe}")
        print(f"Holes won (adjusted): USA {totals.adjusted.usa} - EUROPE {totals.adjusted.europe}")
        print(f"Projected (raw): USA {projected.raw.usa} - EUROPE {projected.raw.europe}")
        print(
            f"Projected (adjusted): USA {projected.adjusted.usa} - "
            f"EUROPE {projected.adjusted.europe}"
        )
        print(f"Completed games: {update.tournament.progress[-1].completed_games}/{len(update.games)}")
    else:
        snapshot = snapshot.model_copy(
            update={"games": [recompute_game(game) for game in snapshot.games]}
        )
        print(f"Recomputed {len(snapshot.games)} games (no tournament record in snapshot)")

    if args.output:
        save_snapshot(snapshot, args.output)
        print(f"Wrote recomputed snapshot to {args.output}")

    if args.progress_csv:
        if snapshot.tournament is None:
            print("No tournament record; skipping progress export")
        else:
            args.progress_csv.write_text(export_progress_csv(snapshot.tournament), encoding="utf-8")
            print(f"Wrote progress timeline to {args.progress_csv}")

    if args.facts:
        for fact in generate_facts(snapshot, _thresholds(args)):
            print(f"- {fact}")


if __name__ == "__main__":
    main()
