"""Container and record schema declarations."""

from .models import (
    DataContainer,
    FieldDescriptor,
    ImportTarget,
    PageName,
    RecordSchema,
    TargetKind,
    discover_targets,
    resolve_target,
)

__all__ = [
    "DataContainer",
    "FieldDescriptor",
    "ImportTarget",
    "PageName",
    "RecordSchema",
    "TargetKind",
    "discover_targets",
    "resolve_target",
]
