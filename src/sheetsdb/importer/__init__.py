"""Import pipeline: binding, assembly, progress and orchestration."""

from .binder import BoundColumn, FieldBinding, SchemaBinder
from .assembler import ImportResult, RecordAssembler
from .progress import ProgressState
from .orchestrator import ImportOrchestrator, ImportState

__all__ = [
    "BoundColumn",
    "FieldBinding",
    "SchemaBinder",
    "ImportResult",
    "RecordAssembler",
    "ProgressState",
    "ImportOrchestrator",
    "ImportState",
]
