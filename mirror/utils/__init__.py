"""Utility modules for the voice engine."""

from .logging import (
    get_logger,
    setup_logging,
)
from .nlp import (
    normalize_text,
    split_into_sentences,
    split_into_paragraphs,
    tokenize_words,
    count_words,
    count_syllables,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # NLP
    "normalize_text",
    "split_into_sentences",
    "split_into_paragraphs",
    "tokenize_words",
    "count_words",
    "count_syllables",
]
