"""
HTTP layer for the RuleBot classifier.

Exposes the classifier over a single chat endpoint plus a liveness
check. All classification logic lives in ``rulebot.classifier``.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .classifier import RuleClassifier
from .settings import Settings, load_settings
from .types import ChatReply, ChatRequest, ErrorReply

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "message is required"


async def _read_message(request: Request) -> str:
    """Pull ``message`` out of the JSON body; anything unusable reads as ""."""
    try:
        payload = await request.json()
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    return ChatRequest.model_validate(payload).text()


def create_app(settings: Optional[Settings] = None,
               classifier: Optional[RuleClassifier] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings (loaded from config/env when omitted)
        classifier: Classifier instance (default rule catalog when omitted)

    Returns:
        Configured FastAPI app
    """
    settings = settings or load_settings()
    classifier = classifier or RuleClassifier()

    app = FastAPI(title="RuleBot IT Support", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/chat", response_model=ChatReply, response_model_exclude_none=True,
              responses={400: {"model": ErrorReply}})
    async def chat(request: Request):
        message = await _read_message(request)
        if not message.strip():
            return JSONResponse(status_code=400, content=ErrorReply(error=MESSAGE_REQUIRED).model_dump())

        rule, response = classifier.resolve(message)
        logger.info("chat request classified as %s", rule.name if rule is not None else "fallback")
        return response.as_payload()

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        return "ok"

    return app
