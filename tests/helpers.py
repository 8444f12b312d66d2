"""
Shared helpers for building upstream replies and signed webhook calls
"""
import base64
import hashlib
import hmac
import json

import requests


CHANNEL_SECRET = "test-channel-secret"
CHANNEL_TOKEN = "test-channel-token"


def make_response(payload, status_code: int = 200, url: str = "https://nlp.example/") -> requests.Response:
    """Build a real requests.Response carrying `payload` (dict, or raw str body)."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    body = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
    response._content = body.encode("utf-8")
    return response


def sign(body: str, secret: str = CHANNEL_SECRET) -> str:
    """Compute the X-Line-Signature value for `body`."""
    digest = hmac.new(secret.encode("utf-8"), body.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def parse_payload(*chunks, status: int = 0, message: str = "") -> dict:
    """COTOHA parse reply built from lists of (kana, pos) pairs."""
    return {
        "result": [
            {
                "chunk_info": {"id": i, "head": -1},
                "tokens": [
                    {"id": j, "form": kana, "kana": kana, "lemma": kana, "pos": pos, "features": []}
                    for j, (kana, pos) in enumerate(chunk)
                ],
            }
            for i, chunk in enumerate(chunks)
        ],
        "status": status,
        "message": message,
    }


TOKEN_PAYLOAD = {
    "access_token": "abc123token",
    "token_type": "bearer",
    "expires_in": "86399",
    "scope": "",
    "issued_at": "1581562165455",
}


