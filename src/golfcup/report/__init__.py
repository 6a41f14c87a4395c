"""Report helpers (CSV export, etc.)."""

from .export import PROGRESS_HEADERS, export_progress_csv

__all__ = [
    "PROGRESS_HEADERS",
    "export_progress_csv",
]
