"""Processing tools — assemble the two-part generation request."""

from __future__ import annotations

import base64
import logging

from google.genai import types

from app.models import EncodedPayload

logger = logging.getLogger(__name__)

SPREADSHEET_PREAMBLE = "Spreadsheet content:"


def build_payload_part(payload: EncodedPayload) -> types.Part:
    """Turn an encoded payload into a request part.

    Inline payloads become binary parts tagged with their MIME type; text
    payloads become a text part prefixed with ``SPREADSHEET_PREAMBLE``.
    """
    if payload.kind == "inline":
        return types.Part.from_bytes(
            data=base64.b64decode(payload.data),
            mime_type=payload.mime_type,
        )
    return types.Part(text=f"{SPREADSHEET_PREAMBLE}\n{payload.text}")


def build_request_parts(payload: EncodedPayload, instruction: str) -> list[types.Part]:
    """Return ``[payload_part, instruction_part]``. The instruction is sent verbatim.

    Raises:
        ValueError: If the instruction is empty.
    """
    if not instruction:
        raise ValueError("An instruction is required to build a generation request.")

    parts = [build_payload_part(payload), types.Part(text=instruction)]
    logger.debug("[ASSEMBLE] Built %s request with %d parts", payload.kind, len(parts))
    return parts
