"""
FastAPI Web Application - LINE Webhook Endpoint
===============================================

Receives LINE webhook calls on POST /callback, answers every text message
with the readings of its content words.

Status codes returned to LINE:
- 200: events handled (even if some replies could not be produced)
- 400: X-Line-Signature missing or wrong
- 500: signed body could not be turned into events
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from ..application import build_reply, dispatch_messages
from ..application.dispatcher import ReplyBuilder
from ..infrastructure.config import Settings, get_settings
from ..infrastructure.line import (
    LineProvider,
    MessagingProvider,
    SignatureVerificationError,
)

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Line-Signature"


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[MessagingProvider] = None,
    reply_builder: ReplyBuilder = build_reply,
) -> FastAPI:
    """
    Build the webhook application.

    Args:
        settings: Configuration; read from the environment when omitted.
        provider: Messaging backend; a LineProvider built from settings when omitted.
        reply_builder: Sentence -> reply pipeline.
    """
    settings = settings or get_settings()
    provider = provider or LineProvider(
        channel_secret=settings.line.channel_secret,
        channel_token=settings.line.channel_token,
    )

    app = FastAPI(title="Kana Echo", description="LINE bot replying with word readings")

    @app.post("/callback", response_class=PlainTextResponse)
    async def callback(request: Request):
        signature = request.headers.get(SIGNATURE_HEADER, "")

        try:
            body = await request.body()
            messages = provider.parse_events(body, signature)
        except SignatureVerificationError:
            logger.warning("Rejected webhook call with invalid signature")
            raise HTTPException(status_code=400, detail="Invalid signature")
        except Exception as e:
            logger.exception(f"Could not extract webhook events: {e}")
            raise HTTPException(status_code=500, detail="Could not process webhook")

        if messages:
            # Outbound calls block; keep them off the event loop
            summary = await run_in_threadpool(
                dispatch_messages,
                messages,
                provider,
                settings.nlp,
                reply_builder,
            )
            logger.info(
                f"Handled {len(messages)} text messages: {summary.replied} replied, "
                f"{summary.upstream_failures} NLP failures, {summary.send_failures} send failures"
            )

        return "OK"

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
