"""SessionManager — tracks one DocumentPipeline per browser session."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional

from app.pipeline import DocumentPipeline

logger = logging.getLogger(__name__)


@dataclass
class PipelineSession:
    """A pipeline plus bookkeeping for the HTTP layer."""

    session_id: str
    pipeline: DocumentPipeline = field(default_factory=DocumentPipeline)
    created_at: float = field(default_factory=time.time)


class SessionManager:
    """Manages in-memory pipeline sessions. Nothing is persisted."""

    def __init__(self) -> None:
        self._sessions: dict[str, PipelineSession] = {}

    def create_session(
        self,
        session_id: Optional[str] = None,
        pipeline: Optional[DocumentPipeline] = None,
    ) -> PipelineSession:
        """Register a new session. Raises ValueError if session_id already exists."""
        session_id = session_id or str(uuid.uuid4())
        if session_id in self._sessions:
            raise ValueError(f"Session '{session_id}' already exists.")
        session = PipelineSession(session_id=session_id, pipeline=pipeline or DocumentPipeline())
        self._sessions[session_id] = session
        logger.info("[SESSION] Created session %s", session_id)
        return session

    def get_session(self, session_id: str) -> Optional[PipelineSession]:
        """Get a session by ID, or None if not found."""
        return self._sessions.get(session_id)

    def remove_session(self, session_id: str) -> bool:
        """Remove a session from tracking. Returns False if it did not exist."""
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("[SESSION] Removed session %s", session_id)
        return removed

    def __len__(self) -> int:
        return len(self._sessions)


# Module-level singleton
session_manager = SessionManager()
