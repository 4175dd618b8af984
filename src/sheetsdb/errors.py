"""Exceptions raised by sheetsdb."""


class SheetsDbError(Exception):
    """Base class for sheetsdb errors."""
    pass


class PageFetchError(SheetsDbError):
    """Raised when a page could not be downloaded. Fatal to the whole import run."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Failed to fetch page from '{url}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
