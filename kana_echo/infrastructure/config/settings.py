"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses, passed explicitly to the app factory
  and the reply pipeline
- Single source of truth for all configurable values

EXTENSIBILITY:
- To switch NLP provider: add provider-specific settings next to NlpSettings
- To add another messaging platform: add a sibling of LineSettings
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env_timeout() -> Optional[float]:
    raw = os.getenv("NLP_TIMEOUT_SECONDS", "").strip()
    return float(raw) if raw else None


def _env_client_secret() -> str:
    # Older deployments used the misspelled COTOHA_CLIENT_SERCRET
    return os.getenv("COTOHA_CLIENT_SECRET") or os.getenv("COTOHA_CLIENT_SERCRET", "")


@dataclass(frozen=True)
class LineSettings:
    """LINE Messaging API channel credentials."""

    channel_secret: str = field(default_factory=lambda: os.getenv("CHANNEL_SECRET", ""))
    channel_token: str = field(default_factory=lambda: os.getenv("CHANNEL_TOKEN", ""))


@dataclass(frozen=True)
class NlpSettings:
    """COTOHA API credentials and endpoints."""

    client_id: str = field(default_factory=lambda: os.getenv("COTOHA_CLIENT_ID", ""))
    client_secret: str = field(default_factory=_env_client_secret)

    token_url: str = field(
        default_factory=lambda: os.getenv(
            "COTOHA_TOKEN_URL",
            "https://api.ce-cotoha.com/v1/oauth/accesstokens"
        )
    )
    parse_url: str = field(
        default_factory=lambda: os.getenv(
            "COTOHA_PARSE_URL",
            "https://api.ce-cotoha.com/api/dev/nlp/v1/parse"
        )
    )

    # None keeps the transport default (wait indefinitely)
    timeout_seconds: Optional[float] = field(default_factory=_env_timeout)


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from kana_echo.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.nlp.client_id)
    """

    # Sub-settings groups
    line: LineSettings = field(default_factory=LineSettings)
    nlp: NlpSettings = field(default_factory=NlpSettings)

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings/errors.
        Returns empty list if all settings are valid.
        Entries starting with "ERROR:" must stop the process.
        """
        issues = []

        if not self.line.channel_secret:
            issues.append("ERROR: CHANNEL_SECRET not set. Webhook signatures cannot be verified.")

        if not self.line.channel_token:
            issues.append("ERROR: CHANNEL_TOKEN not set. Replies cannot be sent.")

        if not self.nlp.client_id or not self.nlp.client_secret:
            issues.append(
                "WARNING: COTOHA_CLIENT_ID or COTOHA_CLIENT_SECRET not set. "
                "Every access token request will be rejected."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Only the process entry point should call this; everything else
    receives its settings as an argument.
    """
    return Settings()
