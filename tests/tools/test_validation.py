"""Tests for the MIME allow-list."""

import pytest

from app.exceptions import FileValidationError
from app.models import SelectedDocument
from app.tools.validation import (
    XLSX_MIME_TYPE,
    is_supported_mime_type,
    normalize_mime_type,
    validate_document,
)


class TestIsSupportedMimeType:
    @pytest.mark.parametrize(
        "mime_type",
        [
            "application/pdf",
            XLSX_MIME_TYPE,
            "image/png",
            "image/jpeg",
            "image/webp",
            "image/svg+xml",
        ],
    )
    def test_accepted(self, mime_type: str):
        assert is_supported_mime_type(mime_type) is True

    @pytest.mark.parametrize(
        "mime_type",
        [
            "text/plain",
            "text/csv",
            "application/json",
            "application/vnd.ms-excel",
            "application/msword",
            "application/octet-stream",
            "video/mp4",
            "imagex/png",
            "",
            None,
        ],
    )
    def test_rejected(self, mime_type):
        assert is_supported_mime_type(mime_type) is False

    def test_parameters_and_case_ignored(self):
        assert is_supported_mime_type("Application/PDF; charset=binary") is True


class TestNormalizeMimeType:
    def test_strips_parameters(self):
        assert normalize_mime_type("image/png; q=0.9") == "image/png"

    def test_none_becomes_empty(self):
        assert normalize_mime_type(None) == ""


class TestValidateDocument:
    def test_returns_document_when_supported(self):
        doc = SelectedDocument.from_bytes("scan.png", "image/png", b"\x89PNG")
        assert validate_document(doc) is doc

    def test_raises_for_unsupported(self):
        doc = SelectedDocument.from_bytes("notes.txt", "text/plain", b"hello")
        with pytest.raises(FileValidationError) as exc_info:
            validate_document(doc)
        assert exc_info.value.mime_type == "text/plain"
        assert "PDF" in str(exc_info.value)
