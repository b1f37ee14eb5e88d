"""Exceptions raised while turning a selected document into generated text."""


class DocumentError(Exception):
    """Base exception for document pipeline errors."""


class FileValidationError(DocumentError):
    """Raised when a file's declared MIME type is not supported."""

    def __init__(self, mime_type: str, message: str | None = None) -> None:
        self.mime_type = mime_type
        super().__init__(message or f"Unsupported file type: {mime_type or 'unknown'}")


class ReadError(DocumentError):
    """Raised when the document bytes cannot be read in full."""


class ParseError(DocumentError):
    """Raised when a spreadsheet is not a valid workbook container."""


class RemoteError(DocumentError):
    """Raised when the generation call fails or returns no text."""
