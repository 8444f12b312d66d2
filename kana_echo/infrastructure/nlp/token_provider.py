"""
Token Provider - COTOHA OAuth Access Token
==========================================

Exchanges the client credentials for a short-lived bearer token.

ARCHITECTURAL DECISION:
- A fresh token is requested for every message (no caching)
- Any failure raises TokenAcquisitionError; the caller decides what
  happens to the message being processed
"""

import logging

import requests
from pydantic import ValidationError

from ..config import NlpSettings
from .errors import TokenAcquisitionError
from .models import AccessTokenResponse

logger = logging.getLogger(__name__)

GRANT_TYPE = "client_credentials"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "charset": "UTF-8",
}


def acquire_token(settings: NlpSettings) -> str:
    """
    Request an access token from the OAuth endpoint.

    Args:
        settings: NLP settings holding the client credentials and token URL.

    Returns:
        The bearer token string.

    Raises:
        TokenAcquisitionError: transport failure, non-2xx status, undecodable
            body, or a body without an access token.
    """
    payload = {
        "grantType": GRANT_TYPE,
        "clientId": settings.client_id,
        "clientSecret": settings.client_secret,
    }

    try:
        response = requests.post(
            settings.token_url,
            headers=JSON_HEADERS,
            json=payload,
            timeout=settings.timeout_seconds
        )
        response.raise_for_status()
        data = response.json()
    except requests.Timeout as e:
        raise TokenAcquisitionError(f"Token endpoint timed out: {e}") from e
    except requests.JSONDecodeError as e:
        raise TokenAcquisitionError(f"Token response is not JSON: {e}") from e
    except requests.RequestException as e:
        raise TokenAcquisitionError(f"Token request failed: {e}") from e

    try:
        token = AccessTokenResponse.model_validate(data)
    except ValidationError as e:
        raise TokenAcquisitionError(f"Unexpected token response: {e}") from e

    logger.debug(f"Acquired access token (expires in {token.expires_in}s)")
    return token.access_token
