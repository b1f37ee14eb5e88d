"""Toast-style notifications surfaced alongside pipeline results."""

from __future__ import annotations

import logging
import time
from typing import Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Variant = Literal["default", "destructive"]


class Notification(BaseModel):
    """A single user-visible notice."""

    title: str
    description: str
    variant: Variant = "default"
    created_at: float = Field(default_factory=time.time)


class NotificationCenter:
    """Collects notifications until the presentation layer drains them."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, title: str, description: str, variant: Variant = "default") -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self._pending.append(notification)
        logger.debug("[NOTIFY] %s: %s", title, description)
        return notification

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return all pending notifications and clear the queue."""
        drained, self._pending = self._pending, []
        return drained

    def __len__(self) -> int:
        return len(self._pending)
