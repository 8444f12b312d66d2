# Domain Layer
# ============
# Pure business logic with no I/O:
# - word_filter: drops grammatical particles and joins the readings
from .word_filter import DELIMITER, EXCLUDED_POS, filter_words

__all__ = ["DELIMITER", "EXCLUDED_POS", "filter_words"]
