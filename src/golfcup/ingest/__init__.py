"""Input adapters that turn stored documents into snapshots."""

from .snapshot import (
    SnapshotError,
    dump_snapshot,
    load_snapshot,
    parse_snapshot,
    save_snapshot,
)

__all__ = [
    "SnapshotError",
    "dump_snapshot",
    "load_snapshot",
    "parse_snapshot",
    "save_snapshot",
]
