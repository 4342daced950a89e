"""
GROK CHAT MAIN API
==================

This module defines the FastAPI application and its HTTP endpoints.

ENDPOINTS:
  GET  /          - Returns API name and list of endpoints.
  GET  /health    - Returns whether the store and the relay are initialized.
  POST /api/chat  - Relays one message to the xAI API and returns the reply.

ERROR RESPONSES (POST /api/chat):
  500 {"error": "API key not configured"}                        - XAI_API_KEY missing
  400 {"error": "Message is required"}                           - no message in body
  500 {"error": "Failed to get AI response", "details": "..."}   - upstream failure

STARTUP:
  The lifespan function creates the in-memory ChatStore and the XaiService.
  The store lives for the lifetime of the process; nothing is saved on shutdown.
"""

import json
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.models import ChatRequest, ChatResponse, ErrorResponse
from app.services.store import ChatStore
from app.services.xai_service import (
    XaiService,
    RelayConfigurationError,
    RelayValidationError,
)
from config import ASSISTANT_NAME, HOST, PORT


# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger("GROK.CHAT")


# -----------------------------------------------------------------------------
# GLOBAL SERVICE REFERENCES
# -----------------------------------------------------------------------------
# Set during startup (lifespan) and used by the route handlers.
store: ChatStore = None
xai_service: XaiService = None


# -------------------------------------------------------------------------
# LIFESPAN (STARTUP / SHUTDOWN)
# -------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the data store and the relay on startup; drop them on shutdown."""
    global store, xai_service

    logger.info("=" * 60)
    logger.info("%s Chat - Starting Up...", ASSISTANT_NAME)
    logger.info("=" * 60)

    store = ChatStore()
    logger.info("In-memory store initialized")
    xai_service = XaiService()
    logger.info("xAI relay initialized (configured=%s)", xai_service.is_configured)

    yield

    logger.info("Shutting down; in-memory data is discarded.")
    store = None
    xai_service = None


# -------------------------------------------------------------------------
# FASTAPI APP AND CORS
# -------------------------------------------------------------------------
app = FastAPI(
    title=f"{ASSISTANT_NAME} Chat API",
    description="In-memory chat backend with an xAI relay",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, error: str, details: str = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def _read_chat_request(request: Request) -> ChatRequest:
    """Parse the body leniently: empty, non-JSON or malformed bodies become an empty request."""
    raw = await request.body()
    if not raw:
        return ChatRequest()
    try:
        return ChatRequest.model_validate(json.loads(raw))
    except (ValueError, ValidationError):
        return ChatRequest()


# =========================================================================
# API ENDPOINTS
# =========================================================================

@app.get("/")
async def root():
    """Return the API name and a short description of each endpoint."""
    return {
        "message": f"{ASSISTANT_NAME} Chat API",
        "endpoints": {
            "/api/chat": "Relay a single message to the xAI API",
            "/health": "System health check"
        }
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "store": store is not None,
        "xai_service": xai_service is not None and xai_service.is_configured,
    }


@app.post("/api/chat", response_model=ChatResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def chat(request: Request):
    """
    Send one message to Grok and return the reply.

    REQUEST BODY:
    {
        "message": "What is Python?"
    }

    RESPONSE:
    {
        "response": "Python is a high-level programming language..."
    }
    """
    if xai_service is None or not xai_service.is_configured:
        logger.error("XAI_API_KEY is not set")
        return _error(500, "API key not configured")

    body = await _read_chat_request(request)
    if not body.message:
        return _error(400, "Message is required")

    try:
        # requests is blocking; keep it off the event loop.
        reply = await run_in_threadpool(xai_service.get_response, body.message)
        return ChatResponse(response=reply)
    except RelayConfigurationError:
        return _error(500, "API key not configured")
    except RelayValidationError as e:
        return _error(400, str(e))
    except Exception as e:
        logger.error("Error getting AI response: %s", e, exc_info=True)
        return _error(500, "Failed to get AI response", str(e))


# -------------------------------------------------------------------------
# STANDALONE RUN (python -m app.main)
# -------------------------------------------------------------------------
def run():
    """Start the uvicorn server (same as run.py); used if someone does python -m app.main"""
    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=PORT,
        reload=True,
        log_level="info"
    )

if __name__ == "__main__":
    run()
