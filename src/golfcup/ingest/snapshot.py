"""Load and save tournament snapshots as JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from golfcup.models import TournamentSnapshot


logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot document cannot be read or validated."""


def parse_snapshot(payload: Union[str, bytes, Mapping[str, Any]]) -> TournamentSnapshot:
    """Validate a snapshot from JSON text or an already decoded mapping.

    The document holds ``tournament``, ``games`` and ``players`` using the
    stored camelCase keys; snake_case keys are accepted as well.
    """

    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise SnapshotError("Snapshot must be a JSON object")
    try:
        snapshot = TournamentSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise SnapshotError(str(exc)) from exc
    logger.debug(
        "Parsed snapshot with %d games and %d players",
        len(snapshot.games),
        len(snapshot.players),
    )
    return snapshot


def load_snapshot(path: Path) -> TournamentSnapshot:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Unable to read snapshot {path}: {exc}") from exc
    return parse_snapshot(text)


def dump_snapshot(snapshot: TournamentSnapshot) -> str:
    return snapshot.model_dump_json(by_alias=True, indent=2)


def save_snapshot(snapshot: TournamentSnapshot, path: Path) -> None:
    path.write_text(dump_snapshot(snapshot), encoding="utf-8")
