"""Remote text generation through the Gemini API (google-genai)."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from google import genai
from google.genai import types

from app.exceptions import RemoteError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


class TextGenerator(Protocol):
    """Anything that turns request parts into text using a per-call credential."""

    async def generate(self, api_key: str, parts: list[types.Part]) -> str: ...


def make_client(api_key: str, timeout_ms: Optional[int] = None) -> genai.Client:
    """Build a Gemini client bound to one credential."""
    http_options = types.HttpOptions(timeout=timeout_ms) if timeout_ms else None
    return genai.Client(api_key=api_key, http_options=http_options)


async def close_client(client: genai.Client) -> None:
    """Release the client's async transport on SDK versions that expose aclose()."""
    aclose = getattr(client.aio, "aclose", None)
    if aclose is not None:
        await aclose()


class GeminiGenerator:
    """Sends request parts to ``generate_content`` and returns the response text.

    A fresh client is built for every call so the credential is held only for
    the duration of that call.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        timeout_ms: Optional[int] = None,
        client_factory: Optional[Callable[[str], genai.Client]] = None,
    ) -> None:
        self.model = model
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory or (lambda key: make_client(key, self.timeout_ms))

    async def generate(self, api_key: str, parts: list[types.Part]) -> str:
        """Run one generation call.

        Raises:
            RemoteError: On any client, transport or API failure, or when the
                response carries no text.
        """
        logger.info("[GENERATE] Calling %s with %d parts", self.model, len(parts))
        try:
            client = self._client_factory(api_key)
            try:
                response = await client.aio.models.generate_content(
                    model=self.model,
                    contents=parts,
                )
                text = response.text
            finally:
                await close_client(client)
        except Exception as e:
            # The exception text may echo the credential; keep only its type.
            raise RemoteError(f"Generation request failed ({type(e).__name__}).") from None

        if text is None:
            raise RemoteError("Generation response contained no text.")

        logger.info("[GENERATE] Received %d characters from %s", len(text), self.model)
        return text
