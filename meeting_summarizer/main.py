"""
Meeting Summarizer FastAPI Application

Accepts meeting transcripts, summarizes them with an LLM completion
service, lets users edit the result and emails it to recipients.
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger
import uvicorn

from . import __version__
from .config import settings
from .models.requests import ErrorResponse
from .routers import health_router, transcripts_router, summaries_router
from .services import (
    CompletionService,
    EmailService,
    InMemoryStorage,
    Storage,
    SummaryService,
)
from .utils.validators import format_validation_errors

_log_sink_id: Optional[int] = None


def configure_logging():
    """Add the rotating file sink once per process"""
    global _log_sink_id
    if _log_sink_id is not None or not settings.log_file:
        return

    _log_sink_id = logger.add(
        settings.log_file,
        rotation="1 day",
        retention="30 days",
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[request_id]} | {name}:{function}:{line} | {message}"
    )
    logger.configure(extra={"request_id": "-"})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup and shutdown events
    """
    logger.info("Starting Meeting Summarizer API...")
    logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    logger.info("📊 SERVICE STATUS SUMMARY:")
    logger.info(f"   🗄️  Storage: {type(app.state.storage).__name__} (not durable)")
    logger.info(f"   🤖 Completion: {'✅ Configured' if settings.completion_configured else '❌ Placeholder API key'}")
    logger.info(f"   ✉️  Email: {'✅ Configured' if settings.smtp_configured else '❌ Placeholder SMTP credentials'}")
    logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")

    if not settings.completion_configured:
        logger.warning("   ❌ Completion: set GROQ_API_KEY to generate summaries")
    if not settings.smtp_configured:
        logger.warning("   ❌ Email: set SMTP_USER and SMTP_PASS to send summaries")

    yield

    logger.info("Shutting down Meeting Summarizer API...")

    try:
        await app.state.completion_service.close()
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")


async def add_request_id(request: Request, call_next):
    """Add unique request ID to each request for tracking"""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    # Add request ID to logger context
    with logger.contextualize(request_id=request_id):
        logger.info(f"Request started: {request.method} {request.url}")

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"Request completed: {request.method} {request.url} "
            f"(status: {response.status_code}, time: {process_time:.3f}s)"
        )

    return response


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent error format"""
    request_id = getattr(request.state, 'request_id', None)

    error_response = ErrorResponse(
        error=exc.__class__.__name__,
        message=str(exc.detail),
        timestamp=datetime.now(timezone.utc),
        request_id=request_id
    )

    logger.warning(f"HTTP Exception: {exc.status_code} - {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode='json')
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors as client errors with per-field detail"""
    request_id = getattr(request.state, 'request_id', None)

    error_details = format_validation_errors(exc)

    error_response = ErrorResponse(
        error="ValidationError",
        message="Invalid request data",
        details={"validation_errors": error_details},
        timestamp=datetime.now(timezone.utc),
        request_id=request_id
    )

    logger.warning(f"Validation Error: {error_details}")

    return JSONResponse(
        status_code=400,
        content=error_response.model_dump(mode='json')
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    request_id = getattr(request.state, 'request_id', None)

    error_response = ErrorResponse(
        error="InternalServerError",
        message="An unexpected error occurred",
        details={"error_type": exc.__class__.__name__} if settings.debug_mode else None,
        timestamp=datetime.now(timezone.utc),
        request_id=request_id
    )

    logger.opt(exception=exc).error(f"Unexpected error: {exc}")

    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(mode='json')
    )


def create_app(
    storage: Optional[Storage] = None,
    completion_service: Optional[CompletionService] = None,
    email_service: Optional[EmailService] = None
) -> FastAPI:
    """
    Build the application with its own store and collaborators.

    Anything not passed in is built from settings; tests pass fakes.
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="""
        Backend for summarizing meeting transcripts with an LLM.

        ## Features

        * **Transcripts**: paste text or upload .txt / .docx files
        * **Summaries**: AI-generated, with optional custom instructions, editable after creation
        * **Sharing**: email a summary to any number of recipients

        Storage is in-memory; all data is lost on restart.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.storage = storage or InMemoryStorage()
    app.state.completion_service = completion_service or CompletionService.from_settings(settings)
    app.state.email_service = email_service or EmailService.from_settings(settings)
    app.state.summary_service = SummaryService(
        storage=app.state.storage,
        completion_service=app.state.completion_service,
        email_service=app.state.email_service
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_request_id)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health_router)
    app.include_router(transcripts_router, prefix=settings.api_prefix)
    app.include_router(summaries_router, prefix=settings.api_prefix)

    @app.get("/", tags=["root"])
    async def root():
        """
        Root endpoint with API information
        """
        prefix = settings.api_prefix
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs_url": "/docs",
            "health_check": "/health",
            "endpoints": {
                "upload_transcript": f"{prefix}/transcripts/upload",
                "create_transcript": f"{prefix}/transcripts",
                "generate_summary": f"{prefix}/summaries/generate",
                "summary": f"{prefix}/summaries/{{id}}",
                "email_summary": f"{prefix}/summaries/email"
            },
            "limits": {
                "max_upload_size_mb": settings.max_upload_size_mb
            }
        }

    return app


app = create_app()


# Development server
if __name__ == "__main__":
    uvicorn.run(
        "meeting_summarizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower(),
        access_log=True
    )
