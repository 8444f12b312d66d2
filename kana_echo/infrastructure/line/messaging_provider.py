"""
Messaging Provider - Abstraction Layer for Chat Platforms
=========================================================

Provides a unified interface for receiving webhook events and replying to them.
Currently supports the LINE Messaging API through line-bot-sdk.

USAGE:
    provider = LineProvider(channel_secret="...", channel_token="...")
    for message in provider.parse_events(body, signature):
        provider.send_reply(message.reply_token, "ネコ..ナク")
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from linebot.v3 import SignatureValidator, WebhookParser
from linebot.v3.exceptions import InvalidSignatureError
from linebot.v3.messaging import (
    ApiClient,
    Configuration,
    MessagingApi,
    ReplyMessageRequest,
    TextMessage,
)
from linebot.v3.messaging.exceptions import ApiException
from linebot.v3.webhooks import MessageEvent, TextMessageContent

logger = logging.getLogger(__name__)


class MessagingProviderError(Exception):
    """Base exception for messaging provider errors."""
    pass


class SignatureVerificationError(MessagingProviderError):
    """Raised when a webhook request fails the platform's authenticity check."""
    pass


class WebhookPayloadError(MessagingProviderError):
    """Raised when a signed webhook body cannot be turned into events."""
    pass


@dataclass(frozen=True)
class IncomingText:
    """A text message addressed to the bot, with the token needed to answer it."""

    reply_token: str
    text: str


class MessagingProvider(ABC):
    """
    Abstract base class for chat platform providers.
    Implement this interface to add new messaging backends.
    """

    @abstractmethod
    def parse_events(self, body: bytes, signature: str) -> list[IncomingText]:
        """
        Verify a webhook request and return its text messages.
        Events that are not text messages are dropped.
        """
        ...

    @abstractmethod
    def send_reply(self, reply_token: str, text: str) -> bool:
        """Reply to a message. Returns True if sent."""
        ...


class LineProvider(MessagingProvider):
    """LINE Messaging API provider backed by line-bot-sdk v3."""

    def __init__(self, channel_secret: str, channel_token: str):
        self._validator = SignatureValidator(channel_secret)
        self._parser = WebhookParser(channel_secret)
        self._configuration = Configuration(access_token=channel_token)

    def parse_events(self, body: bytes, signature: str) -> list[IncomingText]:
        """Check X-Line-Signature on the raw body, then extract text message events."""
        # Strict UTF-8 decoding happens only once the signature has passed
        if not self._validator.validate(body.decode("utf-8", errors="replace"), signature or ""):
            raise SignatureVerificationError("Invalid signature")

        try:
            events = self._parser.parse(body.decode("utf-8"), signature)
        except InvalidSignatureError as e:
            raise SignatureVerificationError(str(e)) from e
        except Exception as e:
            raise WebhookPayloadError(f"Could not parse webhook body: {e}") from e

        messages = []
        for event in events:
            if isinstance(event, MessageEvent) and isinstance(event.message, TextMessageContent):
                messages.append(
                    IncomingText(
                        reply_token=event.reply_token,
                        text=event.message.text,
                    )
                )
            else:
                logger.debug(f"Ignoring {type(event).__name__}")

        return messages

    def send_reply(self, reply_token: str, text: str) -> bool:
        """Send a single text message with the reply token."""
        try:
            request = ReplyMessageRequest(
                reply_token=reply_token,
                messages=[TextMessage(text=text)],
            )
            with ApiClient(self._configuration) as api_client:
                MessagingApi(api_client).reply_message(request)
            return True
        except ApiException as e:
            logger.error(f"LINE reply failed ({e.status}): {e.body}")
            return False
        except Exception as e:
            logger.exception(f"Unexpected error sending LINE reply: {e}")
            return False
