"""Pydantic request/response models for the HTTP API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from app.models import Status
from app.notifications import Notification


class CreateSessionResponse(BaseModel):
    """Response from POST /sessions."""

    session_id: str


class SessionResponse(BaseModel):
    """Response from GET /sessions/{session_id}."""

    session_id: str
    status: Status
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    result: Optional[str] = None
    error_message: Optional[str] = None
    notifications: list[Notification] = []


class SelectFileResponse(BaseModel):
    """Response from POST /sessions/{session_id}/file."""

    status: str  # "selected"
    file_name: str
    mime_type: str
    size: int
    notifications: list[Notification] = []


class GenerateResponse(BaseModel):
    """Response from POST /sessions/{session_id}/generate and POST /process."""

    status: Status
    result: Optional[str] = None
    error_message: Optional[str] = None
    notifications: list[Notification] = []
