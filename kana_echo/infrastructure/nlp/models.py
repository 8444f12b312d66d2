"""Pydantic schemas for the COTOHA token and parse endpoints.

Undeclared fields in the upstream payload are ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccessTokenResponse(BaseModel):
    """Reply of the OAuth access token endpoint."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    access_token: str = Field(..., min_length=1)
    token_type: Optional[str] = None
    expires_in: Optional[str] = None
    scope: Optional[str] = None
    issued_at: Optional[str] = None


class ParseToken(BaseModel):
    """A single morpheme of the parse result."""

    kana: str
    pos: str


class ParseChunk(BaseModel):
    """A group of tokens (bunsetsu) in the order they appear in the sentence."""

    tokens: list[ParseToken] = Field(default_factory=list)


class ParseResult(BaseModel):
    """Reply of the parse endpoint."""

    result: list[ParseChunk] = Field(default_factory=list)
    status: Optional[int] = 0
    message: Optional[str] = ""

    def iter_tokens(self):
        """Yield every token across every chunk in sentence order."""
        for chunk in self.result:
            yield from chunk.tokens
