"""Conversion of cell strings into typed values."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, get_args, get_origin

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
FLOAT_PATTERN = re.compile(
    r"^\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|inf|infinity)\s*$",
    re.IGNORECASE,
)

TRUE_OPTIONS = ("true", "yes")
FALSE_OPTIONS = ("false", "no")


@dataclass
class CellParseResult:
    """Outcome of parsing one cell."""

    value: Any = None
    error: bool = False
    handled: bool = True  # False when no conversion exists for the target type


def is_enum_type(target_type: Any) -> bool:
    if get_origin(target_type) is not None or not isinstance(target_type, type):
        return False
    return issubclass(target_type, Enum)


def list_item_type(target_type: Any) -> Optional[Any]:
    """Return X for list[X], otherwise None."""
    if get_origin(target_type) is list:
        args = get_args(target_type)
        if len(args) == 1:
            return args[0]
    return None


def parse_int(cell: str) -> tuple[int, bool]:
    """Parse a base-10 signed integer. Returns (value, error)."""
    if not INTEGER_PATTERN.match(cell):
        logger.warning(f"Error at parsing '{cell}' to integer")
        return 0, True
    return int(cell), False


def parse_float(cell: str) -> tuple[float, bool]:
    """
    Parse a float, accepting a decimal comma.

    Parsing never consults the process locale, "3,14" and "3.14" both give 3.14.
    """
    normalized = cell.replace(",", ".")
    if not FLOAT_PATTERN.match(normalized):
        return 0.0, True
    return float(normalized), False


def parse_bool(cell: str) -> tuple[bool, bool]:
    """Parse yes/no/true/false (any case). Returns (value, error)."""
    lowered = cell.lower()
    if lowered in TRUE_OPTIONS:
        return True, False
    if lowered in FALSE_OPTIONS:
        return False, False
    return False, True


def parse_int_list(cell: str) -> tuple[list[int], bool]:
    """
    Parse a comma-separated list of integers.

    Every item is attempted. Bad items flag an error but the items that did
    parse are still returned.
    """
    values = []
    error = False
    for item in cell.split(","):
        if INTEGER_PATTERN.match(item):
            values.append(int(item))
        else:
            error = True
    return values, error


def match_enum_member(enum_type: type[Enum], name: str) -> Optional[Enum]:
    """Find an enum member by name, ignoring case."""
    lowered = name.lower()
    for member_name, member in enum_type.__members__.items():
        if member_name.lower() == lowered:
            return member
    return None


def parse_enum_list(cell: str, enum_type: type[Enum]) -> tuple[Optional[list[Enum]], bool]:
    """
    Parse a comma-separated list of enum names.

    Strict: the first unknown name aborts the whole cell and returns None,
    unlike parse_int_list which keeps partial results.
    """
    values = []
    for item in cell.split(","):
        trimmed = item.strip()
        member = match_enum_member(enum_type, trimmed)
        if member is None:
            logger.warning(f"'{trimmed}' is not a valid value for enum {enum_type.__name__}")
            return None, True
        values.append(member)
    return values, False


def parse_enum(cell: str, enum_type: type[Enum]) -> tuple[Optional[Enum], bool]:
    """
    Parse a single enum name.

    Unknown names fall back to the first declared member and are not
    reported as errors.
    """
    member = match_enum_member(enum_type, cell.strip())
    if member is None:
        member = next(iter(enum_type), None)
    return member, False


class CellParser:
    """Dispatch a cell string to the converter for a target type."""

    def parse(self, cell: str, target_type: Any) -> CellParseResult:
        """
        Convert a cell to target_type.

        Precedence: str, int, float, bool, list[int], list[Enum], Enum.
        Any other type returns handled=False.

        Args:
            cell: Raw cell text
            target_type: The field annotation to convert to

        Returns:
            CellParseResult with the value and error flag
        """
        if target_type is str:
            return CellParseResult(value=cell)

        if target_type is int:
            return CellParseResult(*parse_int(cell))

        if target_type is float:
            return CellParseResult(*parse_float(cell))

        if target_type is bool:
            return CellParseResult(*parse_bool(cell))

        item_type = list_item_type(target_type)
        if item_type is int:
            return CellParseResult(*parse_int_list(cell))

        if is_enum_type(item_type):
            return CellParseResult(*parse_enum_list(cell, item_type))

        if is_enum_type(target_type):
            return CellParseResult(*parse_enum(cell, target_type))

        return CellParseResult(value=None, error=False, handled=False)
