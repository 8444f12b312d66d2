"""
Webhook Dispatcher
==================

Runs the reply pipeline for each text message of a webhook call and sends
the result back through the messaging provider.

FAILURE SCOPE:
- A failure while building a reply only costs the message it happened on
  (no reply is sent)
- A reply that cannot be delivered is logged
- Neither stops the remaining messages of the batch
"""

import logging
from dataclasses import dataclass
from typing import Callable

from ..infrastructure.config import NlpSettings
from ..infrastructure.line import IncomingText, MessagingProvider
from ..infrastructure.nlp import NlpServiceError
from .reply_pipeline import build_reply

logger = logging.getLogger(__name__)

ReplyBuilder = Callable[[str, NlpSettings], str]


@dataclass
class DispatchSummary:
    """Outcome counters for one webhook call."""

    replied: int = 0
    upstream_failures: int = 0
    send_failures: int = 0


def dispatch_messages(
    messages: list[IncomingText],
    provider: MessagingProvider,
    settings: NlpSettings,
    reply_builder: ReplyBuilder = build_reply,
) -> DispatchSummary:
    """
    Answer every message in order.

    Args:
        messages: Text messages extracted from the webhook body.
        provider: Where replies are sent.
        settings: NLP settings handed to the reply builder.
        reply_builder: Pipeline turning a sentence into reply text.

    Returns:
        DispatchSummary with per-outcome counts.
    """
    summary = DispatchSummary()

    for message in messages:
        try:
            reply = reply_builder(message.text, settings)
        except NlpServiceError as e:
            logger.error(f"NLP pipeline failed for reply token {message.reply_token}: {e}")
            summary.upstream_failures += 1
            continue
        except Exception as e:
            logger.exception(f"Unexpected error building reply for {message.reply_token}: {e}")
            summary.upstream_failures += 1
            continue

        if provider.send_reply(message.reply_token, reply):
            summary.replied += 1
        else:
            logger.warning(f"Reply not delivered for reply token {message.reply_token}")
            summary.send_failures += 1

    return summary
