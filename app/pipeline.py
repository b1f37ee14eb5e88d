"""DocumentPipeline — validate, encode, assemble and invoke for one user.

State machine::

    IDLE -> IN_FLIGHT -> COMPLETED   (result = response text)
                      -> ERRORED     (result unset, generic notice)

COMPLETED and ERRORED go straight back to IN_FLIGHT on the next call.
Concurrent calls are not guarded: whichever finishes last writes the state.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.exceptions import FileValidationError
from app.generation import TextGenerator
from app.models import PipelineState, SelectedDocument
from app.notifications import NotificationCenter
from app.tools.ingestion import encode_document
from app.tools.processing import build_request_parts
from app.tools.validation import validate_document

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = (
    "An error occurred while processing the document. Please check your API key and try again."
)


class DocumentPipeline:
    """Holds one selected document and the outcome of the latest generation."""

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        notifications: Optional[NotificationCenter] = None,
    ) -> None:
        if generator is None:
            from app.services import generator as default_generator

            generator = default_generator
        self._generator = generator
        self.notifications = notifications or NotificationCenter()
        self.state = PipelineState()
        self.document: Optional[SelectedDocument] = None

    def select_document(self, document: SelectedDocument) -> bool:
        """Replace the selected document if its type is supported.

        On rejection the previous document and the state are left untouched
        and a destructive notification is emitted.
        """
        try:
            validate_document(document)
        except FileValidationError as e:
            self.notifications.notify("Invalid file type", str(e), variant="destructive")
            return False

        self.document = document
        self.state.file_name = document.name
        self.state.mime_type = document.mime_type
        self.notifications.notify("File selected", f"{document.name} is ready to process.")
        logger.info("[PIPELINE] Selected %s (%s)", document.name, document.mime_type)
        return True

    def can_generate(self, api_key: str, prompt: str) -> bool:
        return bool(api_key and prompt and self.document is not None)

    async def generate(self, api_key: str, prompt: str) -> Optional[str]:
        """Run the document and prompt through the generator.

        Returns the generated text, or None when inputs are missing or the
        call failed. ``api_key`` is used for this call only.
        """
        if not self.can_generate(api_key, prompt):
            logger.debug("[PIPELINE] Missing credential, prompt or document; not generating")
            return None

        document = self.document
        self.state.status = "IN_FLIGHT"
        self.state.result = None
        self.state.error_message = None

        try:
            payload = await encode_document(document)
            parts = build_request_parts(payload, prompt)
            text = await self._generator.generate(api_key, parts)
        except Exception:
            logger.exception("[PIPELINE] Error processing document %s", document.name)
            self.state.status = "ERRORED"
            self.state.result = None
            self.state.error_message = GENERIC_FAILURE_MESSAGE
            self.notifications.notify("Error", GENERIC_FAILURE_MESSAGE, variant="destructive")
            return None

        self.state.status = "COMPLETED"
        self.state.result = text
        self.notifications.notify("Success", "Document processed successfully.")
        logger.info("[PIPELINE] Completed %s: %d characters", document.name, len(text))
        return text
