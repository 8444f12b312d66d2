from .messaging_provider import (
    IncomingText,
    LineProvider,
    MessagingProvider,
    MessagingProviderError,
    SignatureVerificationError,
    WebhookPayloadError,
)

__all__ = [
    "IncomingText",
    "LineProvider",
    "MessagingProvider",
    "MessagingProviderError",
    "SignatureVerificationError",
    "WebhookPayloadError",
]
