"""Tokenization helpers used by the fingerprint extractor.

Sentence segmentation uses NLTK's Punkt tokenizer built from fixed
parameters, so no model download or training happens at runtime and the
same text always segments the same way.
"""

import re
import string
from functools import lru_cache
from typing import List

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

# Lowercase, without the trailing period (Punkt's abbreviation format).
ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt",
    "vs", "etc", "e.g", "i.e", "cf", "al", "approx", "dept", "est",
    "inc", "ltd", "co", "corp", "no", "vol", "fig", "jan", "feb",
    "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct", "nov", "dec",
    "u.s", "u.k", "ph.d", "b.a", "m.a", "b.s", "m.s",
})

_STRIP_CHARS = string.punctuation + "“”‘’…«»"
_TOKEN_SPLIT_RE = re.compile(r"\s+|[—–]|-{2,}")
_HAS_ALNUM_RE = re.compile(r"[A-Za-z0-9]")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


@lru_cache(maxsize=1)
def _sentence_tokenizer() -> PunktSentenceTokenizer:
    params = PunktParameters()
    params.abbrev_types = set(ABBREVIATIONS)
    return PunktSentenceTokenizer(params)


def normalize_text(text: str) -> str:
    """Normalize line endings, apostrophes and blank-line runs."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("’", "'").replace("‘", "'")
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def split_into_sentences(text: str) -> List[str]:
    """Split text into sentences.

    Boundaries are `.`, `!` or `?` followed by whitespace. Known
    abbreviations ("Dr.", "e.g.") do not end a sentence and decimals such
    as "3.5" never split because no whitespace follows the period.
    Sentences without any word token are dropped.

    Args:
        text: Input text.

    Returns:
        List of sentence strings.
    """
    if not text or not text.strip():
        return []
    sentences = []
    for paragraph in split_into_paragraphs(text):
        for sentence in _sentence_tokenizer().tokenize(paragraph):
            sentence = sentence.strip()
            if sentence and tokenize_words(sentence):
                sentences.append(sentence)
    return sentences


def split_into_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    if not text:
        return []
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def tokenize_words(text: str) -> List[str]:
    """Split on whitespace and dashes, strip surrounding punctuation, lowercase.

    Tokens with no letter or digit left ("-", "...") are discarded.
    Hyphenated words and contractions stay as single tokens.
    """
    if not text:
        return []
    words = []
    for raw in _TOKEN_SPLIT_RE.split(text):
        token = raw.strip(_STRIP_CHARS)
        if token and _HAS_ALNUM_RE.search(token):
            words.append(token.lower())
    return words


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split()) if text else 0


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups.

    Words of three letters or fewer count as one syllable. A trailing
    "-es", "-ed" or silent "e" and a leading "y" are dropped before counting.
    """
    word = re.sub(r"[^a-z]", "", word.lower())
    if len(word) <= 3:
        return 1
    word = re.sub(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$", "", word)
    word = re.sub(r"^y", "", word)
    groups = re.findall(r"[aeiouy]{1,2}", word)
    return max(1, len(groups))
