"""Ingestion tools — read a selected document and encode it for a request.

Two strategies, chosen through ``ENCODERS`` by MIME type:

* binary documents (PDF, images) become base64 text;
* XLSX workbooks are flattened into one text transcript, one CSV block per
  sheet in workbook order.
"""

from __future__ import annotations

import asyncio
import base64
import io
import logging
from typing import Awaitable, Callable, Optional

import pandas as pd

from app.exceptions import FileValidationError, ParseError, ReadError
from app.models import EncodedPayload, SelectedDocument
from app.tools.validation import (
    IMAGE_MIME_PREFIX,
    PDF_MIME_TYPE,
    XLSX_MIME_TYPE,
    normalize_mime_type,
)

logger = logging.getLogger(__name__)

Encoder = Callable[[SelectedDocument], Awaitable[EncodedPayload]]


def load_document_bytes(document: SelectedDocument) -> bytes:
    """Return the full byte content of a document.

    Blocking; callers run it in a worker thread.

    Raises:
        ReadError: If the file cannot be read or is shorter/longer than declared.
    """
    if document.content is not None:
        content = document.content
    elif document.path is not None:
        try:
            content = document.path.read_bytes()
        except OSError as e:
            raise ReadError(f"Failed to read {document.name}: {e}") from e
    else:
        raise ReadError(f"No content available for {document.name}.")

    if document.size is not None and len(content) != document.size:
        raise ReadError(
            f"Truncated read for {document.name}: expected {document.size} bytes, got {len(content)}."
        )
    return content


def sheet_to_csv(df: pd.DataFrame) -> str:
    """Serialize a header-less sheet grid as CSV without a trailing newline."""
    if df.empty:
        return ""
    text = df.to_csv(index=False, header=False, lineterminator="\n")
    return text[:-1] if text.endswith("\n") else text


def workbook_to_text(content: bytes) -> str:
    """Flatten every sheet of an XLSX workbook into a single transcript.

    Each sheet contributes ``Sheet: <name>``, its CSV body and a blank line.

    Raises:
        ParseError: If the bytes are not a readable workbook.
    """
    try:
        sheets = pd.read_excel(
            io.BytesIO(content),
            sheet_name=None,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
            engine="openpyxl",
        )
    except Exception as e:
        raise ParseError(f"Failed to parse workbook: {e}") from e

    blocks = [f"Sheet: {name}\n{sheet_to_csv(df)}\n\n" for name, df in sheets.items()]
    logger.debug("[ENCODE] Flattened %d sheets: %s", len(sheets), list(sheets))
    return "".join(blocks)


def _read_and_flatten(document: SelectedDocument) -> str:
    return workbook_to_text(load_document_bytes(document))


async def encode_binary(document: SelectedDocument) -> EncodedPayload:
    """Read the document and base64-encode it, keeping its MIME type."""
    content = await asyncio.to_thread(load_document_bytes, document)
    logger.info("[ENCODE] Encoded %s: %d bytes", document.name, len(content))
    return EncodedPayload.inline(
        base64.b64encode(content).decode("ascii"),
        normalize_mime_type(document.mime_type),
    )


async def flatten_workbook(document: SelectedDocument) -> EncodedPayload:
    """Read and flatten an XLSX workbook into a text payload."""
    text = await asyncio.to_thread(_read_and_flatten, document)
    logger.info("[ENCODE] Flattened workbook %s: %d characters", document.name, len(text))
    return EncodedPayload.transcript(text, normalize_mime_type(document.mime_type))


# Exact MIME types first, then "<major>/*" wildcards.
ENCODERS: dict[str, Encoder] = {
    PDF_MIME_TYPE: encode_binary,
    XLSX_MIME_TYPE: flatten_workbook,
    f"{IMAGE_MIME_PREFIX}*": encode_binary,
}


def resolve_encoder(mime_type: str) -> Optional[Encoder]:
    """Look up the encoding strategy for a MIME type, or None if unsupported."""
    normalized = normalize_mime_type(mime_type)
    encoder = ENCODERS.get(normalized)
    if encoder is None and "/" in normalized:
        encoder = ENCODERS.get(normalized.split("/", 1)[0] + "/*")
    return encoder


async def encode_document(document: SelectedDocument) -> EncodedPayload:
    """Encode a document with the strategy registered for its MIME type.

    Raises:
        FileValidationError: If no strategy handles the MIME type.
        ReadError: If the bytes cannot be read.
        ParseError: If a workbook cannot be parsed.
    """
    encoder = resolve_encoder(document.mime_type)
    if encoder is None:
        raise FileValidationError(document.mime_type)
    return await encoder(document)
