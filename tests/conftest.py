"""
Shared test fixtures
"""
import pytest

from kana_echo.infrastructure.config import LineSettings, NlpSettings, Settings

from .helpers import CHANNEL_SECRET, CHANNEL_TOKEN


@pytest.fixture
def nlp_settings() -> NlpSettings:
    return NlpSettings(
        client_id="client-id",
        client_secret="client-secret",
        token_url="https://auth.example/v1/oauth/accesstokens",
        parse_url="https://nlp.example/nlp/v1/parse",
        timeout_seconds=None,
    )


@pytest.fixture
def settings(nlp_settings) -> Settings:
    return Settings(
        line=LineSettings(channel_secret=CHANNEL_SECRET, channel_token=CHANNEL_TOKEN),
        nlp=nlp_settings,
        host="127.0.0.1",
        port=8000,
        log_level="INFO",
    )
