"""
Reply Pipeline
==============

Turns one chat message into the reply text:
    acquire_token -> parse -> filter_words

Every call fetches a new access token. Errors from either HTTP call
propagate as NlpServiceError subclasses.
"""

import logging

from ..domain import filter_words
from ..infrastructure.config import NlpSettings
from ..infrastructure.nlp import acquire_token, parse

logger = logging.getLogger(__name__)


def build_reply(sentence: str, settings: NlpSettings) -> str:
    """Return the delimiter-joined readings of the content words in `sentence`."""
    token = acquire_token(settings)
    parsed = parse(sentence, token, settings)
    reply = filter_words(parsed)
    logger.debug(f"Filtered {sentence!r} -> {reply!r}")
    return reply
