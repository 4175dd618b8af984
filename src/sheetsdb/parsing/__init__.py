"""CSV tokenizing, table reading and cell conversion."""

from .tokenizer import split_line
from .table import Header, HeaderSet, RowSet, TableReader
from .cells import CellParser, CellParseResult

__all__ = [
    "split_line",
    "Header",
    "HeaderSet",
    "RowSet",
    "TableReader",
    "CellParser",
    "CellParseResult",
]
