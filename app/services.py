"""Shared services for the application.

Reads configuration from the environment (and a local ``.env``) and builds
the default text generator used by every pipeline.
"""

import os

from dotenv import load_dotenv

from app.generation import DEFAULT_MODEL, GeminiGenerator

load_dotenv()

GEMINI_MODEL = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)

_timeout = os.getenv("GEMINI_HTTP_TIMEOUT_MS")
GEMINI_HTTP_TIMEOUT_MS = int(_timeout) if _timeout else None

generator = GeminiGenerator(model=GEMINI_MODEL, timeout_ms=GEMINI_HTTP_TIMEOUT_MS)
