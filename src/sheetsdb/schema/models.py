"""Schema declarations: containers, import targets and record field tables."""

import logging
import types
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Union, get_args, get_origin

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class TargetKind(str, Enum):
    """Whether a target holds one record or a list of them."""

    SINGLE = "single"
    COLLECTION = "collection"


@dataclass(frozen=True)
class PageName:
    """Marks a container field as filled from the sheet page with this name.

    Used as ``Annotated[list[Item], PageName("Items")]``.
    """

    name: str


@dataclass(frozen=True)
class ImportTarget:
    """A container field that receives the contents of one page."""

    name: str  # Container field name
    page_name: str
    kind: TargetKind
    element_type: Optional[type[BaseModel]] = None  # None when it cannot be resolved


def unwrap_optional(annotation: Any) -> Any:
    """Return X for Optional[X]; other annotations are returned unchanged."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


@dataclass(frozen=True)
class FieldDescriptor:
    """A settable field of a record type."""

    name: str
    annotation: Any  # Target type for cell conversion, Optional already unwrapped

    def set(self, record: BaseModel, value: Any):
        setattr(record, self.name, value)


@dataclass(frozen=True)
class RecordSchema:
    """Field-descriptor table for one record type, keyed by field name."""

    record_type: type[BaseModel]
    fields: dict[str, FieldDescriptor] = field(default_factory=dict)

    @classmethod
    def for_type(cls, record_type: type[BaseModel]) -> "RecordSchema":
        """Build (once) and return the schema of a record type."""
        return _build_record_schema(record_type)

    def get(self, name: str) -> Optional[FieldDescriptor]:
        """Look up a field by exact name."""
        return self.fields.get(name)

    def new_record(self) -> BaseModel:
        return self.record_type()


@lru_cache(maxsize=None)
def _build_record_schema(record_type: type[BaseModel]) -> RecordSchema:
    fields = {
        name: FieldDescriptor(name=name, annotation=unwrap_optional(info.annotation))
        for name, info in record_type.model_fields.items()
    }
    return RecordSchema(record_type=record_type, fields=fields)


def is_constructible_record(candidate: Any) -> bool:
    """True for pydantic models that can be built without arguments."""
    if get_origin(candidate) is not None or not isinstance(candidate, type):
        return False
    if not issubclass(candidate, BaseModel):
        return False
    return all(not info.is_required() for info in candidate.model_fields.values())


def resolve_target(name: str, page_name: str, annotation: Any) -> ImportTarget:
    """
    Work out the kind and element type of a container field.

    list[X] is a collection of X; anything else is a single record.
    Bare lists, unions of several types and records that need constructor
    arguments leave the element type unresolved.
    """
    annotation = unwrap_optional(annotation)

    if annotation is list or get_origin(annotation) is list:
        args = get_args(annotation)
        element = unwrap_optional(args[0]) if len(args) == 1 else None
        kind = TargetKind.COLLECTION
    else:
        element = annotation
        kind = TargetKind.SINGLE

    if not is_constructible_record(element):
        element = None

    return ImportTarget(name=name, page_name=page_name, kind=kind, element_type=element)


def discover_targets(container_type: type[BaseModel]) -> list[ImportTarget]:
    """
    List the import targets of a container in field declaration order.

    Only fields annotated with PageName are targets.
    """
    targets = []
    for name, info in container_type.model_fields.items():
        page = next((meta for meta in info.metadata if isinstance(meta, PageName)), None)
        if page is None:
            continue
        targets.append(resolve_target(name, page.name, info.annotation))

    logger.debug(f"Discovered {len(targets)} import targets in {container_type.__name__}")
    return targets


class DataContainer(BaseModel):
    """
    Base class for containers hydrated from a sheet document.

    Subclasses declare target fields, for example::

        class GameData(DataContainer):
            items: Annotated[list[Item], PageName("Items")] = Field(default_factory=list)
            config: Annotated[Optional[Config], PageName("Config")] = None
    """

    document_id: str = ""

    @classmethod
    def import_targets(cls) -> list[ImportTarget]:
        return discover_targets(cls)
