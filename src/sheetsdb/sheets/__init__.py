"""Google Sheets CSV download."""

from .client import SheetsCsvClient, build_page_url

__all__ = [
    "SheetsCsvClient",
    "build_page_url",
]
