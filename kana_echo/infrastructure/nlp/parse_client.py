"""
Parse Client - COTOHA Syntactic Parse API
=========================================

Sends one sentence to the parse endpoint and decodes the morphemes.
"""

import logging

import requests
from pydantic import ValidationError

from ..config import NlpSettings
from .errors import ParseRequestError
from .models import ParseResult
from .token_provider import JSON_HEADERS

logger = logging.getLogger(__name__)

PARSE_TYPE = "default"


def parse(sentence: str, token: str, settings: NlpSettings) -> ParseResult:
    """
    Parse a sentence into chunks of tokens.

    Args:
        sentence: Text to analyse.
        token: Bearer token from acquire_token().
        settings: NLP settings holding the parse URL and timeout.

    Returns:
        ParseResult with chunks in sentence order.

    Raises:
        ParseRequestError: transport failure, non-2xx status, undecodable
            body, schema mismatch, or a non-zero upstream status.
    """
    headers = {
        **JSON_HEADERS,
        "Authorization": f"Bearer {token}",
    }
    payload = {
        "sentence": sentence,
        "type": PARSE_TYPE,
    }

    try:
        response = requests.post(
            settings.parse_url,
            headers=headers,
            json=payload,
            timeout=settings.timeout_seconds
        )
        response.raise_for_status()
        data = response.json()
    except requests.Timeout as e:
        raise ParseRequestError(f"Parse endpoint timed out: {e}") from e
    except requests.JSONDecodeError as e:
        raise ParseRequestError(f"Parse response is not JSON: {e}") from e
    except requests.RequestException as e:
        raise ParseRequestError(f"Parse request failed: {e}") from e

    try:
        result = ParseResult.model_validate(data)
    except ValidationError as e:
        raise ParseRequestError(f"Unexpected parse response: {e}") from e

    # Upstream reports its own errors (rate limits, bad input) with a non-zero status
    if result.status:
        raise ParseRequestError(
            f"Parse API returned status {result.status}: {result.message or 'no message'}"
        )

    logger.debug(f"Parsed {len(result.result)} chunks")
    return result
