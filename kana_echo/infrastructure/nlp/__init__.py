from .errors import NlpServiceError, TokenAcquisitionError, ParseRequestError
from .models import AccessTokenResponse, ParseResult, ParseChunk, ParseToken
from .token_provider import acquire_token
from .parse_client import parse

__all__ = [
    "NlpServiceError",
    "TokenAcquisitionError",
    "ParseRequestError",
    "AccessTokenResponse",
    "ParseResult",
    "ParseChunk",
    "ParseToken",
    "acquire_token",
    "parse",
]
