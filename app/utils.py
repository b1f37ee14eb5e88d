"""Shared utility functions."""

import mimetypes

EXTENSION_MIME_MAP = {
    "pdf": "application/pdf",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "heic": "image/heic",
    "heif": "image/heif",
}

GENERIC_MIME_TYPE = "application/octet-stream"


def guess_mime_type(filename: str) -> str:
    """Guess a MIME type from a filename extension.

    Args:
        filename: The name of the file (used to determine extension).

    Returns:
        The MIME type, or ``application/octet-stream`` when unknown.
    """
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext in EXTENSION_MIME_MAP:
        return EXTENSION_MIME_MAP[ext]

    guessed, _ = mimetypes.guess_type(filename)
    return guessed or GENERIC_MIME_TYPE


def resolve_upload_mime_type(filename: str, content_type: str | None) -> str:
    """Prefer the client-declared content type, fall back to the extension."""
    if content_type and content_type != GENERIC_MIME_TYPE:
        return content_type
    return guess_mime_type(filename)
