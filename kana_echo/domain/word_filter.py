"""
Word Filter - Part-of-Speech Based Reading Filter
=================================================

Keeps the readings of content words and drops grammatical glue.
The tags are the literal part-of-speech values emitted by the COTOHA
parser and must not be translated.
"""

from ..infrastructure.nlp.models import ParseResult

EXCLUDED_POS = frozenset({
    "格助詞",    # case-marking particle
    "連用助詞",  # adverbial particle
    "引用助詞",  # quotative particle
    "終助詞",    # sentence-final particle
    "判定詞",    # copula
})

DELIMITER = ".."


def filter_words(parsed: ParseResult) -> str:
    """
    Join the readings of every non-excluded token, in sentence order.

    Returns an empty string when no token survives.
    """
    readings = [
        token.kana
        for token in parsed.iter_tokens()
        if token.pos not in EXCLUDED_POS
    ]
    return DELIMITER.join(readings)
