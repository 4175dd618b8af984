"""Hydrate typed in-memory records from Google Sheets pages published as CSV."""

from .errors import PageFetchError, SheetsDbError
from .importer import ImportOrchestrator, ImportState
from .schema import DataContainer, PageName, TargetKind

__all__ = [
    "DataContainer",
    "ImportOrchestrator",
    "ImportState",
    "PageFetchError",
    "PageName",
    "SheetsDbError",
    "TargetKind",
]
