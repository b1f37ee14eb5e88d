"""Shared data models for the document processing pipeline."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel

Status = Literal[
    "IDLE",
    "IN_FLIGHT",
    "ERRORED",
    "COMPLETED",
]

PayloadKind = Literal["inline", "text"]


class PipelineState(BaseModel):
    """Observable state of one pipeline instance.

    The HTTP layer returns this model as-is. ``result`` stays None until a
    generation call has completed successfully.
    """

    status: Status = "IDLE"
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    result: Optional[str] = None
    error_message: Optional[str] = None


@dataclass(frozen=True)
class SelectedDocument:
    """A user-selected file: raw bytes (or a path to read them from) plus metadata."""

    name: str
    mime_type: str
    content: Optional[bytes] = None
    path: Optional[pathlib.Path] = None
    size: Optional[int] = None

    @classmethod
    def from_bytes(cls, name: str, mime_type: str, content: bytes) -> SelectedDocument:
        return cls(name=name, mime_type=mime_type, content=content, size=len(content))

    @classmethod
    def from_path(
        cls, path: str | pathlib.Path, mime_type: Optional[str] = None
    ) -> SelectedDocument:
        """Reference a file on disk. Bytes are read lazily by the encoder."""
        from app.utils import guess_mime_type

        path = pathlib.Path(path)
        return cls(
            name=path.name,
            mime_type=mime_type or guess_mime_type(path.name),
            path=path,
        )


@dataclass(frozen=True)
class EncodedPayload:
    """Request-ready form of a document.

    ``inline`` payloads carry base64 ``data`` with the original MIME type;
    ``text`` payloads carry the flattened spreadsheet transcript.
    """

    kind: PayloadKind
    mime_type: str
    data: Optional[str] = None
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind == "inline" and (self.data is None or self.text is not None):
            raise ValueError("Inline payloads carry base64 data and no text.")
        if self.kind == "text" and (self.text is None or self.data is not None):
            raise ValueError("Text payloads carry a transcript and no data.")

    @classmethod
    def inline(cls, data: str, mime_type: str) -> EncodedPayload:
        return cls(kind="inline", mime_type=mime_type, data=data)

    @classmethod
    def transcript(cls, text: str, mime_type: str) -> EncodedPayload:
        return cls(kind="text", mime_type=mime_type, text=text)
