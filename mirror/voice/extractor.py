"""Extract a voice fingerprint from plain text.

Pure and deterministic: no I/O and no timestamps, so the same text always
produces an identical fingerprint. Every rate guards its denominator and
falls back to 0.0, so empty or very short input degrades to zeros rather
than raising.
"""

import re
from collections import Counter
from typing import Iterable, List, Sequence

import numpy as np

from ..utils.logging import get_logger
from ..utils.nlp import (
    count_syllables,
    normalize_text,
    split_into_paragraphs,
    split_into_sentences,
    tokenize_words,
)
from . import thresholds as th
from .fingerprint import (
    FingerprintMeta,
    PunctuationFeatures,
    RhetoricFeatures,
    RhythmFeatures,
    VocabularyFeatures,
    VoiceFeatures,
    VoiceFingerprint,
)

logger = get_logger(__name__)


def _phrase_pattern(phrases: Iterable[str], right_boundary: str = r"(?![\w'])") -> re.Pattern:
    """Compile phrases into one pattern matching whole words only.

    Longer phrases are tried first so "i think" wins over "i".
    """
    alternatives = [
        r"\s+".join(re.escape(part) for part in phrase.split())
        for phrase in sorted(phrases, key=len, reverse=True)
    ]
    return re.compile(r"(?<![\w'])(?:" + "|".join(alternatives) + r")" + right_boundary)


CONTRACTION_RE = _phrase_pattern(th.CONTRACTIONS)
# "i.e." is not a pronoun.
PRONOUN_RE = _phrase_pattern(th.PERSONAL_PRONOUNS, right_boundary=r"(?![\w']|\.\w)")
HEDGE_RE = _phrase_pattern(th.HEDGE_PHRASES)
QUALIFIER_RE = _phrase_pattern(th.QUALIFIER_WORDS)
ASSERTIVE_RE = _phrase_pattern(th.ASSERTIVE_WORDS)
TRANSITION_RE = _phrase_pattern(th.TRANSITION_WORDS)
EXAMPLE_RE = _phrase_pattern(th.EXAMPLE_PHRASES)
PASSIVE_RE = re.compile(
    r"(?<![\w'])(?:" + "|".join(th.BE_VERBS) + r")\s+"
    r"(?:\w+ed|" + "|".join(th.IRREGULAR_PARTICIPLES) + r")(?![\w'])"
)

DASH_RE = re.compile(r"—|–|--|(?<=\s)-(?=\s)")
ELLIPSIS_RE = re.compile(r"\.{3}|…")
LIST_MARKER_RE = re.compile(r"^[ \t]*(?:[-•*]|\d+[.)])[ \t]", re.MULTILINE)
QUESTION_OPENER_RE = re.compile(r"^[^.!?]*\?")
BOLD_RE = re.compile(r"\*\*[^*]+\*\*")
ITALIC_RE = re.compile(r"(?<!\*)\*[^*\s][^*]*\*(?!\*)")
UNDERSCORE_RE = re.compile(r"(?<!\w)_[^_\s][^_]*_(?!\w)")
ALL_CAPS_RE = re.compile(r"\b[A-Z]{3,}\b")
HAS_LETTER_RE = re.compile(r"[a-z]")

_CONTRACTION_SET = frozenset(th.CONTRACTIONS)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return round(numerator / denominator, th.RATIO_DIGITS)


def _per_thousand(count: int, word_count: int) -> float:
    return _ratio(count * th.RATE_PER_WORDS, word_count)


def _mean(values: Sequence[int]) -> float:
    if not values:
        return 0.0
    return round(float(np.mean(values)), th.AVERAGE_DIGITS)


def _std(values: Sequence[int]) -> float:
    if not values:
        return 0.0
    return round(float(np.std(values)), th.AVERAGE_DIGITS)


class VoiceFingerprintExtractor:
    """Extract a VoiceFingerprint from a single document's text."""

    def __init__(self, top_words_limit: int = th.TOP_WORDS_LIMIT):
        self.top_words_limit = top_words_limit

    def extract(self, text: str) -> VoiceFingerprint:
        """Extract the fingerprint.

        Args:
            text: Plain document text. Callers are expected to enforce a
                minimum length; short text yields noisy but valid numbers.

        Returns:
            VoiceFingerprint for the text. Text without any words yields
            the all-zero fingerprint.
        """
        clean = normalize_text(text)
        words = tokenize_words(clean)
        if not words:
            return VoiceFingerprint()

        sentences = split_into_sentences(clean)
        paragraphs = split_into_paragraphs(clean)
        lowered = clean.lower()

        sentence_lengths = [len(tokenize_words(s)) for s in sentences]
        paragraph_lengths = [len(tokenize_words(p)) for p in paragraphs]

        rhythm = self._extract_rhythm(sentence_lengths, paragraph_lengths)
        vocabulary = self._extract_vocabulary(words, lowered)
        voice = self._extract_voice(words, lowered, len(sentences), vocabulary)
        punctuation = self._extract_punctuation(clean, len(words))
        rhetoric = self._extract_rhetoric(clean, lowered, len(sentences), paragraphs)

        logger.debug(
            f"Extracted fingerprint: {len(words)} words, {len(sentences)} sentences, "
            f"avg length {rhythm.avg_sentence_length:.1f}"
        )

        return VoiceFingerprint(
            rhythm=rhythm,
            vocabulary=vocabulary,
            voice=voice,
            punctuation=punctuation,
            rhetoric=rhetoric,
            meta=FingerprintMeta(
                sample_word_count=len(words),
                sample_sentence_count=len(sentences),
            ),
        )

    def _extract_rhythm(
        self,
        sentence_lengths: List[int],
        paragraph_lengths: List[int],
    ) -> RhythmFeatures:
        count = len(sentence_lengths)
        short = sum(1 for n in sentence_lengths if n < th.SHORT_SENTENCE_WORDS)
        long = sum(1 for n in sentence_lengths if n > th.LONG_SENTENCE_WORDS)

        return RhythmFeatures(
            avg_sentence_length=_mean(sentence_lengths),
            sentence_variation=_std(sentence_lengths),
            short_sentence_ratio=_ratio(short, count),
            long_sentence_ratio=_ratio(long, count),
            avg_paragraph_length=_mean(paragraph_lengths),
            paragraph_variation=_std(paragraph_lengths),
        )

    def _extract_vocabulary(self, words: List[str], lowered: str) -> VocabularyFeatures:
        word_count = len(words)
        complex_words = sum(
            1 for w in words if count_syllables(w) >= th.COMPLEX_WORD_SYLLABLES
        )
        contractions = len(CONTRACTION_RE.findall(lowered))

        return VocabularyFeatures(
            complex_word_ratio=_ratio(complex_words, word_count),
            contraction_ratio=_ratio(contractions, word_count),
            top_words=self._top_words(words),
            unique_word_count=len(set(words)),
            avg_word_length=_mean([len(w) for w in words]),
            rarity_score=_ratio(len(set(words)), word_count),
        )

    def _top_words(self, words: List[str]) -> List[str]:
        """Most frequent content words; ties keep first-occurrence order."""
        counts = Counter(
            w for w in words
            if w not in th.STOPWORDS
            and w not in _CONTRACTION_SET
            and HAS_LETTER_RE.search(w)
        )
        # Counter keeps insertion order and sorted() is stable.
        ranked = sorted(counts.items(), key=lambda item: -item[1])
        return [word for word, _ in ranked[: self.top_words_limit]]

    def _extract_voice(
        self,
        words: List[str],
        lowered: str,
        sentence_count: int,
        vocabulary: VocabularyFeatures,
    ) -> VoiceFeatures:
        word_count = len(words)
        passive = len(PASSIVE_RE.findall(lowered))
        passive_share = min(_ratio(passive, sentence_count), 1.0)
        pronoun_rate = _ratio(len(PRONOUN_RE.findall(lowered)), word_count)

        formality = (
            th.FORMALITY_BASE
            + vocabulary.complex_word_ratio * th.FORMALITY_COMPLEX_WEIGHT
            - vocabulary.contraction_ratio * th.FORMALITY_CONTRACTION_WEIGHT
            - pronoun_rate * th.FORMALITY_PRONOUN_WEIGHT
            - passive_share * th.FORMALITY_PASSIVE_WEIGHT
        )

        return VoiceFeatures(
            formality_score=round(min(1.0, max(0.0, formality)), th.RATIO_DIGITS),
            assertive_density=_ratio(len(ASSERTIVE_RE.findall(lowered)), word_count),
            hedge_density=_ratio(len(HEDGE_RE.findall(lowered)), word_count),
            qualifier_density=_ratio(len(QUALIFIER_RE.findall(lowered)), word_count),
            personal_pronoun_rate=pronoun_rate,
            active_voice_ratio=round(1.0 - passive_share, th.RATIO_DIGITS),
        )

    def _extract_punctuation(self, text: str, word_count: int) -> PunctuationFeatures:
        return PunctuationFeatures(
            exclamation_rate=_per_thousand(text.count("!"), word_count),
            question_rate=_per_thousand(text.count("?"), word_count),
            dash_rate=_per_thousand(len(DASH_RE.findall(text)), word_count),
            semicolon_rate=_per_thousand(text.count(";"), word_count),
            ellipsis_rate=_per_thousand(len(ELLIPSIS_RE.findall(text)), word_count),
            colon_rate=_per_thousand(text.count(":"), word_count),
            comma_rate=_per_thousand(text.count(","), word_count),
        )

    def _extract_rhetoric(
        self,
        text: str,
        lowered: str,
        sentence_count: int,
        paragraphs: List[str],
    ) -> RhetoricFeatures:
        paragraph_count = len(paragraphs)
        question_openers = sum(1 for p in paragraphs if QUESTION_OPENER_RE.match(p))
        list_markers = len(LIST_MARKER_RE.findall(text))

        return RhetoricFeatures(
            transition_word_rate=_ratio(len(TRANSITION_RE.findall(lowered)), sentence_count),
            question_opener_rate=_ratio(question_openers, paragraph_count),
            list_usage_rate=_ratio(list_markers, paragraph_count),
            example_usage_rate=_ratio(len(EXAMPLE_RE.findall(lowered)), sentence_count),
            emphasis_patterns=self._emphasis_patterns(text),
        )

    @staticmethod
    def _emphasis_patterns(text: str) -> List[str]:
        patterns = []
        if BOLD_RE.search(text):
            patterns.append("bold-markdown")
        if ITALIC_RE.search(text):
            patterns.append("italic-markdown")
        if UNDERSCORE_RE.search(text):
            patterns.append("underscore-emphasis")
        if len(ALL_CAPS_RE.findall(text)) > 2:
            patterns.append("all-caps")
        return patterns


_default_extractor = VoiceFingerprintExtractor()


def extract_fingerprint(text: str) -> VoiceFingerprint:
    """Extract a voice fingerprint with default settings."""
    return _default_extractor.extract(text)
