"""Tool implementations."""

from app.tools.ingestion import (
    ENCODERS,
    encode_binary,
    encode_document,
    flatten_workbook,
    resolve_encoder,
    workbook_to_text,
)
from app.tools.processing import SPREADSHEET_PREAMBLE, build_request_parts
from app.tools.validation import (
    ACCEPTED_FORMATS,
    XLSX_MIME_TYPE,
    is_supported_mime_type,
    validate_document,
)

__all__ = [
    "validate_document",
    "is_supported_mime_type",
    "ACCEPTED_FORMATS",
    "XLSX_MIME_TYPE",
    "encode_document",
    "encode_binary",
    "flatten_workbook",
    "workbook_to_text",
    "resolve_encoder",
    "ENCODERS",
    "build_request_parts",
    "SPREADSHEET_PREAMBLE",
]
