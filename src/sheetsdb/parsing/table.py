"""Reading raw page text into headers and data rows."""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..config import settings
from .tokenizer import split_line

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


@dataclass
class Header:
    """A non-empty header and the column it came from."""

    name: str
    index: int  # Column index in the raw line


@dataclass
class HeaderSet:
    """Headers of a page, in source order."""

    headers: list[Header] = field(default_factory=list)
    dropped_indices: list[int] = field(default_factory=list)  # Columns with an empty header
    id_index: Optional[int] = None  # Raw column index of the identifier column

    @property
    def names(self) -> list[str]:
        return [header.name for header in self.headers]

    def __len__(self) -> int:
        return len(self.headers)


@dataclass
class RowSet:
    """Data rows aligned 1:1 with a HeaderSet."""

    rows: list[list[str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index: int) -> list[str]:
        return self.rows[index]


def split_lines(raw_text: str) -> list[str]:
    """Split raw text on any of \\r\\n, \\r or \\n."""
    return LINE_BREAK_PATTERN.split(raw_text)


class TableReader:
    """Turn raw CSV page text into a header set and filtered rows."""

    def __init__(self, id_header: Optional[str] = None):
        self.id_header = (id_header if id_header is not None else settings.id_header).lower()

    def read(self, raw_text: str) -> tuple[HeaderSet, RowSet]:
        """
        Read a page.

        Columns with an empty header are dropped from the header set and from
        every row. When an identifier column exists, rows whose identifier
        cell is empty are skipped. Empty lines are ignored.

        Args:
            raw_text: The full CSV text of one page

        Returns:
            Tuple of (HeaderSet, RowSet) with matching column counts
        """
        lines = [line for line in split_lines(raw_text) if line]
        if not lines:
            return HeaderSet(), RowSet()

        header_set = self.read_headers(lines[0])
        dropped = set(header_set.dropped_indices)
        width = len(header_set)

        rows = []
        skipped = 0
        for line in lines[1:]:
            cells = split_line(line)

            if header_set.id_index is not None:
                id_cell = cells[header_set.id_index] if header_set.id_index < len(cells) else ""
                if not id_cell:
                    skipped += 1
                    continue

            row = [cell for index, cell in enumerate(cells) if index not in dropped]
            if len(row) < width:
                row.extend([""] * (width - len(row)))
            rows.append(row[:width])

        if skipped:
            logger.debug(f"Skipped {skipped} rows with an empty identifier")

        return header_set, RowSet(rows=rows)

    def read_headers(self, line: str) -> HeaderSet:
        """Tokenize the header line, recording empty columns and the identifier column."""
        header_set = HeaderSet()

        for index, name in enumerate(split_line(line)):
            if not name:
                header_set.dropped_indices.append(index)
                continue

            if header_set.id_index is None and name.lower() == self.id_header:
                header_set.id_index = index

            header_set.headers.append(Header(name=name, index=index))

        return header_set
