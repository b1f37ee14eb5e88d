"""Tests for the shared data models."""

import pathlib

import pytest
from pydantic import ValidationError

from app.models import EncodedPayload, PipelineState, SelectedDocument


class TestPipelineStateDefaults:
    """PipelineState should be constructable with all defaults."""

    def test_default_status_is_idle(self):
        state = PipelineState()
        assert state.status == "IDLE"

    def test_default_result_absent(self):
        state = PipelineState()
        assert state.result is None
        assert state.error_message is None

    def test_default_file_fields_absent(self):
        state = PipelineState()
        assert state.file_name is None
        assert state.mime_type is None


class TestPipelineStateStatusValues:
    """All four status values should be accepted."""

    @pytest.mark.parametrize("status", ["IDLE", "IN_FLIGHT", "ERRORED", "COMPLETED"])
    def test_valid_status(self, status: str):
        state = PipelineState(status=status)
        assert state.status == status

    def test_invalid_status_raises(self):
        with pytest.raises(ValidationError):
            PipelineState(status="RUNNING")


class TestSelectedDocument:
    def test_from_bytes_records_size(self):
        doc = SelectedDocument.from_bytes("a.pdf", "application/pdf", b"12345")
        assert doc.size == 5
        assert doc.content == b"12345"
        assert doc.path is None

    def test_from_path_guesses_mime_type(self, tmp_path: pathlib.Path):
        path = tmp_path / "report.xlsx"
        path.write_bytes(b"x")
        doc = SelectedDocument.from_path(path)
        assert doc.name == "report.xlsx"
        assert doc.mime_type == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        assert doc.content is None

    def test_is_immutable(self):
        doc = SelectedDocument.from_bytes("a.pdf", "application/pdf", b"x")
        with pytest.raises(AttributeError):
            doc.name = "b.pdf"


class TestEncodedPayload:
    def test_inline_payload(self):
        payload = EncodedPayload.inline("AAEC", "image/png")
        assert payload.kind == "inline"
        assert payload.text is None

    def test_transcript_payload(self):
        payload = EncodedPayload.transcript("Sheet: A\n\n\n", "application/x")
        assert payload.kind == "text"
        assert payload.data is None

    def test_inline_without_data_rejected(self):
        with pytest.raises(ValueError):
            EncodedPayload(kind="inline", mime_type="image/png", text="oops")

    def test_text_with_data_rejected(self):
        with pytest.raises(ValueError):
            EncodedPayload(kind="text", mime_type="x", text="a", data="AAEC")
