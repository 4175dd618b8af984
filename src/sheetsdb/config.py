"""Configuration management for sheetsdb."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_SHEET_URL_TEMPLATE = (
    "https://docs.google.com/spreadsheets/d/{document_id}/gviz/tq?tqx=out:csv&sheet={page_name}"
)


class Settings(BaseModel):
    """Importer settings."""

    # Published CSV endpoint, formatted with document_id and page_name
    sheet_url_template: str = os.getenv("SHEET_URL_TEMPLATE", DEFAULT_SHEET_URL_TEMPLATE)

    # Transport
    fetch_timeout_seconds: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "30.0"))

    # Headers starting with this prefix are never bound to a field
    ignored_header_prefix: str = os.getenv("IGNORED_HEADER_PREFIX", "_")

    # Header (case-insensitive) of the identifier column; rows with an empty id are skipped
    id_header: str = os.getenv("ID_HEADER", "id")


settings = Settings()
