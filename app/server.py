"""FastAPI server exposing the document pipeline as a small REST API."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app.api_models import (
    CreateSessionResponse,
    GenerateResponse,
    SelectFileResponse,
    SessionResponse,
)
from app.models import SelectedDocument
from app.pipeline import DocumentPipeline
from app.sessions import PipelineSession, session_manager
from app.utils import resolve_upload_mime_type

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

MISSING_INPUTS_MESSAGE = "An API key, a prompt and a selected file are required."

# -- FastAPI app ---------------------------------------------------------------
fastapi_app = FastAPI(title="Document Processor", version="0.1.0")

# CORS
cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session_or_404(session_id: str) -> PipelineSession:
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found.")
    return session


async def _read_upload(file: UploadFile) -> SelectedDocument:
    filename = file.filename or "uploaded_file"
    content = await file.read()
    mime_type = resolve_upload_mime_type(filename, file.content_type)
    return SelectedDocument.from_bytes(filename, mime_type, content)


def _select_or_400(pipeline: DocumentPipeline, document: SelectedDocument) -> None:
    if not pipeline.select_document(document):
        rejected = pipeline.notifications.drain()
        detail = rejected[-1].description if rejected else "Unsupported file type."
        raise HTTPException(status_code=400, detail=detail)


async def _run_generation(pipeline: DocumentPipeline, api_key: str, prompt: str) -> GenerateResponse:
    if not pipeline.can_generate(api_key, prompt):
        raise HTTPException(status_code=400, detail=MISSING_INPUTS_MESSAGE)

    await pipeline.generate(api_key, prompt)
    state = pipeline.state
    return GenerateResponse(
        status=state.status,
        result=state.result,
        error_message=state.error_message,
        notifications=pipeline.notifications.drain(),
    )


# -- REST endpoints ------------------------------------------------------------
@fastapi_app.get("/health")
async def health():
    """Health check."""
    return {"status": "healthy"}


@fastapi_app.post("/sessions", response_model=CreateSessionResponse)
async def create_session():
    """Create an empty pipeline session."""
    session = session_manager.create_session()
    return CreateSessionResponse(session_id=session.session_id)


@fastapi_app.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str):
    """Return the pipeline state and any pending notifications."""
    session = _get_session_or_404(session_id)
    pipeline = session.pipeline
    return SessionResponse(
        session_id=session_id,
        **pipeline.state.model_dump(),
        notifications=pipeline.notifications.drain(),
    )


@fastapi_app.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str):
    """Forget a session and its selected document."""
    if not session_manager.remove_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found.")
    return Response(status_code=204)


@fastapi_app.post("/sessions/{session_id}/file", response_model=SelectFileResponse)
async def select_file(session_id: str, file: UploadFile = File(...)):
    """Select the document to process. Unsupported types leave the session unchanged."""
    pipeline = _get_session_or_404(session_id).pipeline
    document = await _read_upload(file)
    _select_or_400(pipeline, document)

    logger.info("Selected %s (%d bytes) for session %s", document.name, document.size, session_id)
    return SelectFileResponse(
        status="selected",
        file_name=document.name,
        mime_type=document.mime_type,
        size=document.size or 0,
        notifications=pipeline.notifications.drain(),
    )


@fastapi_app.post("/sessions/{session_id}/generate", response_model=GenerateResponse)
async def generate(session_id: str, api_key: str = Form(""), prompt: str = Form("")):
    """Run the selected document and prompt through Gemini.

    The API key is used for this request only and is never stored.
    """
    pipeline = _get_session_or_404(session_id).pipeline
    return await _run_generation(pipeline, api_key, prompt)


@fastapi_app.post("/process", response_model=GenerateResponse)
async def process_document(
    api_key: str = Form(""),
    prompt: str = Form(""),
    file: UploadFile = File(...),
):
    """One-shot: select a document and generate on a throwaway pipeline."""
    pipeline = DocumentPipeline()
    _select_or_400(pipeline, await _read_upload(file))
    pipeline.notifications.drain()
    return await _run_generation(pipeline, api_key, prompt)
