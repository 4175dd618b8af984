"""Assembly of records from bound rows."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel

from ..parsing.cells import CellParser
from ..parsing.table import RowSet
from ..schema.models import ImportTarget, TargetKind
from .binder import FieldBinding

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Records produced for one target, ready to be written into the container."""

    target: ImportTarget
    value: Union[BaseModel, list[BaseModel]]

    def write_to(self, container: BaseModel):
        setattr(container, self.target.name, self.value)


class RecordAssembler:
    """Build records from rows using a field binding."""

    def __init__(self, cell_parser: Optional[CellParser] = None):
        self.cell_parser = cell_parser or CellParser()

    def assemble(
        self,
        binding: FieldBinding,
        rows: RowSet,
        target: ImportTarget,
    ) -> Optional[ImportResult]:
        """
        Populate the records of a target.

        COLLECTION targets get one record per row. SINGLE targets use only the
        first row; with no rows a warning is logged and None is returned so
        the container field stays as it is. Cell errors never stop assembly.
        """
        if target.kind == TargetKind.COLLECTION:
            records = [self.populate(binding, row) for row in rows]
            logger.info(f"Populated {len(records)} records for '{target.name}'")
            return ImportResult(target=target, value=records)

        if len(rows) == 0:
            logger.warning(f"No data found for single record field '{target.name}'")
            return None

        return ImportResult(target=target, value=self.populate(binding, rows[0]))

    def populate(self, binding: FieldBinding, row: list[str]) -> BaseModel:
        """Create a blank record and set every bound column from the row."""
        record = binding.record_schema.new_record()
        type_name = binding.record_schema.record_type.__name__

        for column in binding:
            cell = row[column.position]
            result = self.cell_parser.parse(cell, column.field.annotation)

            if not result.handled:
                logger.warning(
                    f"Field '{column.field.name}' of {type_name} has unsupported type "
                    f"{column.field.annotation}, leaving default"
                )
                continue

            if result.error:
                logger.warning(
                    f"Could not parse '{cell}' for field '{column.field.name}' of {type_name}"
                )

            if result.value is None:
                continue

            column.field.set(record, result.value)

        return record
