"""Validation tools — MIME allow-list for selectable documents."""

from __future__ import annotations

import logging

from app.exceptions import FileValidationError
from app.models import SelectedDocument

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

IMAGE_MIME_PREFIX = "image/"

ACCEPTED_MIME_TYPES = {PDF_MIME_TYPE, XLSX_MIME_TYPE}

ACCEPTED_FORMATS = [".pdf", ".xlsx", "image/*"]


def normalize_mime_type(mime_type: str | None) -> str:
    """Drop parameters and case: ``Application/PDF; q=1`` -> ``application/pdf``."""
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


def is_supported_mime_type(mime_type: str | None) -> bool:
    """Return True for images, PDFs and XLSX workbooks."""
    normalized = normalize_mime_type(mime_type)
    return normalized.startswith(IMAGE_MIME_PREFIX) or normalized in ACCEPTED_MIME_TYPES


def validate_document(document: SelectedDocument) -> SelectedDocument:
    """Check a document against the allow-list.

    Returns the document unchanged when accepted.

    Raises:
        FileValidationError: If the declared MIME type is not supported.
    """
    if not is_supported_mime_type(document.mime_type):
        logger.info(
            "[VALIDATE] Rejected %s: unsupported MIME type %r", document.name, document.mime_type
        )
        raise FileValidationError(
            document.mime_type,
            "Please upload a PDF, an image, or an Excel (.xlsx) spreadsheet.",
        )
    return document
