"""Binding of page headers to record fields."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel

from ..config import settings
from ..parsing.table import HeaderSet
from ..schema.models import FieldDescriptor, RecordSchema

logger = logging.getLogger(__name__)


@dataclass
class BoundColumn:
    """A header resolved to a record field."""

    position: int  # Index into each row of the RowSet
    header: str
    field: FieldDescriptor


@dataclass
class FieldBinding:
    """Resolved header-to-field mapping of one page, in header order."""

    record_schema: RecordSchema
    columns: list[BoundColumn] = field(default_factory=list)

    @property
    def headers(self) -> list[str]:
        return [column.header for column in self.columns]

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)


class SchemaBinder:
    """Resolve header names to fields of a record type by exact name."""

    def __init__(self, ignored_prefix: Optional[str] = None):
        self.ignored_prefix = (
            ignored_prefix if ignored_prefix is not None else settings.ignored_header_prefix
        )

    def bind(self, headers: HeaderSet, record_type: type[BaseModel]) -> FieldBinding:
        """
        Bind headers to fields.

        Headers starting with the ignored prefix are skipped silently.
        Headers without a matching field are logged and left out.
        """
        record_schema = RecordSchema.for_type(record_type)
        binding = FieldBinding(record_schema=record_schema)

        for position, name in enumerate(headers.names):
            if self.ignored_prefix and name.startswith(self.ignored_prefix):
                continue

            descriptor = record_schema.get(name)
            if descriptor is None:
                logger.warning(f"Header '{name}' matches no field in {record_type.__name__} type")
                continue

            binding.columns.append(BoundColumn(position=position, header=name, field=descriptor))

        return binding
