"""
FastAPI application for the Know India translation gateway.

Exposes the gateway over HTTP for the site frontend.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from knowindia.config import get_settings
from knowindia.i18n import (
    Misconfigured,
    ValidationError,
    get_gateway,
    load_warmup_texts,
    reset_gateway,
    warm_translation_cache,
)
from knowindia.api.translate import router as translate_router
from knowindia.integrations.sentry import init_sentry

logger = logging.getLogger(__name__)


# =============================================================================
# App State
# =============================================================================


class AppState:
    """Application state - initialized at startup."""

    warmup_task: asyncio.Task | None = None


state = AppState()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup app resources."""
    settings = get_settings()

    if init_sentry(settings):
        logger.info("Sentry error tracking enabled")

    gateway = get_gateway()
    if not settings.has_hf_credentials:
        logger.warning("HF_API_KEY not set - translation requests will fail")

    if settings.translation_warmup_file:
        texts = load_warmup_texts(settings.translation_warmup_file)
        state.warmup_task = asyncio.create_task(
            warm_translation_cache(gateway, texts, settings.warmup_languages_list)
        )

    logger.info(f"Know India API starting in {settings.environment} mode")

    yield

    if state.warmup_task is not None:
        state.warmup_task.cancel()
        with suppress(asyncio.CancelledError):
            await state.warmup_task
    state.warmup_task = None

    await gateway.aclose()
    reset_gateway()
    logger.info("Know India API shutting down")


# =============================================================================
# App Setup
# =============================================================================


app = FastAPI(
    title="Know India Translation API",
    description="Translation gateway for the Know India travel site",
    version="0.1.0",
    lifespan=lifespan,
)


# CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translate_router)


# =============================================================================
# Error Handlers
# =============================================================================


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation error",
            "reason": exc.reason,
            "message": str(exc),
        },
    )


@app.exception_handler(Misconfigured)
async def misconfigured_handler(request: Request, exc: Misconfigured) -> JSONResponse:
    logger.error(f"Translation service misconfigured: {exc}")
    return JSONResponse(
        status_code=503,
        content={
            "error": "Translation service misconfigured",
            "reason": exc.code,
            "message": str(exc),
        },
    )


# =============================================================================
# Health
# =============================================================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "translation_configured": settings.has_hf_credentials,
    }
