"""HTTP surface: study-guide generation and document upload endpoints."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Mapping

from fastapi import APIRouter, FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from examace.errors import (
    ExtractionError,
    MalformedResponse,
    PayloadTooLarge,
    StudyGuideError,
    TransportError,
    ValidationError,
)
from examace.ingestion.models import RawUpload, extension_of
from examace.service import StudyGuideService


logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def cors_origins(environ: Mapping[str, str] | None = None) -> list[str]:
    source: Mapping[str, str] = os.environ if environ is None else environ
    raw = source.get("EXAMACE_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def _status_for(exc: StudyGuideError) -> int:
    if isinstance(exc, PayloadTooLarge):
        return 413
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, ExtractionError):
        return 422
    return 500


def _error_response(exc: StudyGuideError) -> JSONResponse:
    if isinstance(exc, (TransportError, MalformedResponse, ExtractionError)):
        message = exc.user_message
    else:
        message = str(exc)
    return JSONResponse({"error": message, "kind": exc.kind}, status_code=_status_for(exc))


def build_router(service: StudyGuideService) -> APIRouter:
    router = APIRouter()

    @router.post("/generate")
    async def generate(request: Request):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

        input_text = body.get("inputText") if isinstance(body, dict) else None
        try:
            text = service.guard.validate_for_dispatch(input_text)
            result = await asyncio.to_thread(service.generate, text)
        except StudyGuideError as exc:
            logger.warning("Generation request failed (%s): %s", exc.kind, exc)
            return _error_response(exc)
        except Exception as exc:
            logger.exception("Server error in /api/generate")
            return JSONResponse(
                {"error": "Server error in /api/generate", "details": str(exc)},
                status_code=500,
            )

        return result.to_dict()

    @router.post("/extract")
    async def extract(file: UploadFile = File(...)):
        filename = file.filename or ""
        if file.size is not None:
            try:
                service.guard.check_size(filename, extension_of(filename), file.size)
            except PayloadTooLarge as exc:
                return _error_response(exc)

        data = await file.read()
        upload = RawUpload(filename=filename, data=data, content_type=file.content_type)
        logger.info("Upload received (file=%s, bytes=%d)", upload.filename, upload.size)

        try:
            extracted = await asyncio.to_thread(service.extractor.extract, upload)
        except StudyGuideError as exc:
            logger.warning("Error reading file %s: %s", upload.filename, exc)
            return _error_response(exc)

        guarded = service.guard.guard_text(extracted.text)
        return {
            "text": guarded.text,
            "truncated": guarded.truncated,
            "warning": guarded.warning,
        }

    return router


def create_app(service: StudyGuideService | None = None) -> FastAPI:
    """Build the FastAPI app around one shared service (and its PDF engine)."""

    app = FastAPI(title="examAce", version=APP_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    app.include_router(build_router(service or StudyGuideService()), prefix="/api", tags=["study-guide"])

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "version": APP_VERSION}

    return app
