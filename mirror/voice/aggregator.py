"""Merge document fingerprints into a running voice profile.

`aggregate` is a reducer: (prior profile or None, new fingerprint) -> new
profile. It never mutates its inputs and has no storage or clock
dependency beyond the timestamps it records, so callers own persistence
and must serialize updates for the same user.
"""

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from ..utils.logging import get_logger
from . import thresholds as th
from .confidence import calculate_confidence
from .fingerprint import FingerprintMeta, VoiceFingerprint
from .profile import DocumentMeta, EvolutionEntry, VoiceProfile

logger = get_logger(__name__)


def weighted_average(
    existing_value: float,
    existing_weight: float,
    new_value: float,
    new_weight: float,
) -> float:
    """Average two values by their sample sizes.

    With no weight on either side the existing value is kept.
    """
    total = existing_weight + new_weight
    if total == 0:
        return existing_value
    return (existing_value * existing_weight + new_value * new_weight) / total


def merge_word_lists(
    existing: Sequence[str],
    existing_weight: float,
    new_words: Sequence[str],
    new_weight: float,
    max_length: int = th.TOP_WORDS_LIMIT,
) -> List[str]:
    """Re-rank two frequency-ordered word lists.

    Each word scores (list length - position) times its list's weight and
    scores add up across lists. Ties keep the order words were first seen,
    existing list first.
    """
    scores: Dict[str, float] = {}
    for words, weight in ((existing, existing_weight), (new_words, new_weight)):
        for idx, word in enumerate(words):
            scores[word] = scores.get(word, 0.0) + (len(words) - idx) * weight

    ranked = sorted(scores.items(), key=lambda item: -item[1])
    return [word for word, _ in ranked[:max_length]]


def merge_unique(existing: Sequence[str], new_items: Sequence[str]) -> List[str]:
    """Ordered union."""
    return list(dict.fromkeys(list(existing) + list(new_items)))


def _merge_numeric(existing, new, existing_weight: float, new_weight: float, **overrides):
    """Weighted merge of every numeric field of a feature section.

    Non-numeric fields must be supplied through ``overrides``.
    """
    values = {}
    for f in fields(existing):
        if f.name in overrides:
            continue
        old_value = getattr(existing, f.name)
        new_value = getattr(new, f.name)
        merged = weighted_average(old_value, existing_weight, new_value, new_weight)
        values[f.name] = int(round(merged)) if f.type is int else float(merged)
    values.update(overrides)
    return type(existing)(**values)


def merge_fingerprints(
    existing: VoiceFingerprint,
    existing_weight: int,
    new: VoiceFingerprint,
    top_words_limit: int = th.TOP_WORDS_LIMIT,
) -> VoiceFingerprint:
    """Word-count-weighted merge of an aggregate with a new fingerprint.

    Args:
        existing: Current aggregate fingerprint.
        existing_weight: Words already behind the aggregate.
        new: Fingerprint of the newly learned document.
        top_words_limit: Cap for the merged top word list.

    Returns:
        Merged fingerprint whose meta counts cover both inputs.
    """
    new_weight = new.meta.sample_word_count

    vocabulary = _merge_numeric(
        existing.vocabulary,
        new.vocabulary,
        existing_weight,
        new_weight,
        top_words=merge_word_lists(
            existing.vocabulary.top_words,
            existing_weight,
            new.vocabulary.top_words,
            new_weight,
            max_length=top_words_limit,
        ),
    )
    rhetoric = _merge_numeric(
        existing.rhetoric,
        new.rhetoric,
        existing_weight,
        new_weight,
        emphasis_patterns=merge_unique(
            existing.rhetoric.emphasis_patterns,
            new.rhetoric.emphasis_patterns,
        ),
    )

    return VoiceFingerprint(
        rhythm=_merge_numeric(existing.rhythm, new.rhythm, existing_weight, new_weight),
        vocabulary=vocabulary,
        voice=_merge_numeric(existing.voice, new.voice, existing_weight, new_weight),
        punctuation=_merge_numeric(
            existing.punctuation, new.punctuation, existing_weight, new_weight
        ),
        rhetoric=rhetoric,
        meta=FingerprintMeta(
            sample_word_count=existing_weight + new_weight,
            sample_sentence_count=(
                existing.meta.sample_sentence_count + new.meta.sample_sentence_count
            ),
        ),
    )


def _bucket(value: float, low: float, high: float) -> int:
    if value < low:
        return -1
    if value > high:
        return 1
    return 0


# (value getter, low bound, high bound, message when moving up, message when moving down)
BUCKET_RULES = (
    (
        lambda fp: fp.rhythm.avg_sentence_length,
        th.SENTENCE_SHORT_AVG,
        th.SENTENCE_LONG_AVG,
        "sentences got longer",
        "sentences got shorter",
    ),
    (
        lambda fp: fp.voice.formality_score,
        th.FORMALITY_CASUAL,
        th.FORMALITY_FORMAL,
        "tone became more formal",
        "tone became more casual",
    ),
    (
        lambda fp: fp.vocabulary.complex_word_ratio,
        th.COMPLEX_WORDS_SIMPLE,
        th.COMPLEX_WORDS_SOPHISTICATED,
        "vocabulary became more sophisticated",
        "vocabulary became simpler",
    ),
    (
        lambda fp: fp.vocabulary.contraction_ratio,
        th.CONTRACTIONS_AVOIDED,
        th.CONTRACTIONS_FREE,
        "uses more contractions",
        "uses fewer contractions",
    ),
    (
        lambda fp: fp.voice.personal_pronoun_rate,
        0.0,
        th.PERSONAL_PRONOUN_HIGH,
        "writing became more personal",
        "writing became less personal",
    ),
)

STANCE_CHANGES = {
    "hedging": "hedges statements more often",
    "assertive": "makes more confident assertions",
    "neutral": "balances hedging and assertion",
}


def _stance(fp: VoiceFingerprint) -> str:
    if fp.voice.hedge_density > th.HEDGE_DENSITY_HIGH:
        return "hedging"
    if fp.voice.assertive_density > th.ASSERTIVE_DENSITY_HIGH:
        return "assertive"
    return "neutral"


def describe_changes(before: VoiceFingerprint, after: VoiceFingerprint) -> List[str]:
    """List the descriptive buckets the merge moved the profile across.

    Shifts inside a bucket are not reported.
    """
    changes = []
    for getter, low, high, up_message, down_message in BUCKET_RULES:
        old_bucket = _bucket(getter(before), low, high)
        new_bucket = _bucket(getter(after), low, high)
        if new_bucket > old_bucket:
            changes.append(up_message)
        elif new_bucket < old_bucket:
            changes.append(down_message)

    old_stance, new_stance = _stance(before), _stance(after)
    if old_stance != new_stance:
        changes.append(STANCE_CHANGES[new_stance])

    return changes


def aggregate(
    prior: Optional[VoiceProfile],
    new_fingerprint: VoiceFingerprint,
    document_id: str,
    metadata: Optional[DocumentMeta] = None,
    *,
    user_id: str = "",
    history_limit: int = th.EVOLUTION_HISTORY_LIMIT,
    top_words_limit: int = th.TOP_WORDS_LIMIT,
    now: Optional[datetime] = None,
) -> VoiceProfile:
    """Learn one document into a voice profile.

    Args:
        prior: Current profile, or None for the user's first document.
        new_fingerprint: Fingerprint of the document being learned.
        document_id: Caller's identifier for the document.
        metadata: File name and writing type for the evolution log.
        user_id: Owner for a newly created profile; ignored when prior exists.
        history_limit: Evolution entries to retain (oldest dropped first).
        top_words_limit: Cap for the merged top word list.
        now: Timestamp for the log; defaults to the current UTC time.

    Returns:
        A new VoiceProfile. The prior profile is left untouched.

    Raises:
        ValueError: If history_limit is less than 1.
    """
    if history_limit < 1:
        raise ValueError(f"history_limit must be at least 1, got {history_limit}")

    meta = metadata or DocumentMeta()
    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    if prior is None:
        return _create_initial_profile(new_fingerprint, document_id, meta, user_id, timestamp)

    existing_weight = prior.total_word_count
    merged = merge_fingerprints(
        prior.aggregate_fingerprint,
        existing_weight,
        new_fingerprint,
        top_words_limit=top_words_limit,
    )

    document_count = prior.document_count + 1
    total_word_count = existing_weight + new_fingerprint.meta.sample_word_count
    confidence = max(
        prior.confidence_level,
        calculate_confidence(document_count, total_word_count),
    )

    changes = describe_changes(prior.aggregate_fingerprint, merged)
    entry = EvolutionEntry(
        timestamp=timestamp,
        document_id=document_id,
        document_name=meta.file_name,
        writing_type=meta.writing_type,
        changes_made=changes or [th.MINOR_REFINEMENT_CHANGE],
        confidence_delta=confidence - prior.confidence_level,
        confidence_level=confidence,
        total_word_count=total_word_count,
        total_documents=document_count,
    )

    history = (list(prior.evolution_history) + [entry])[-history_limit:]

    logger.debug(
        f"Merged document {document_id}: {document_count} docs, "
        f"{total_word_count} words, confidence {prior.confidence_level} -> {confidence}"
    )

    return VoiceProfile(
        user_id=prior.user_id,
        aggregate_fingerprint=merged,
        confidence_level=confidence,
        document_count=document_count,
        total_word_count=total_word_count,
        last_trained_at=timestamp,
        evolution_history=history,
    )


def _create_initial_profile(
    fingerprint: VoiceFingerprint,
    document_id: str,
    meta: DocumentMeta,
    user_id: str,
    timestamp: str,
) -> VoiceProfile:
    """Seed a profile directly from the first document's fingerprint."""
    total_word_count = fingerprint.meta.sample_word_count
    confidence = calculate_confidence(1, total_word_count)

    logger.debug(f"Created profile from {document_id}: {total_word_count} words")

    return VoiceProfile(
        user_id=user_id,
        aggregate_fingerprint=fingerprint,
        confidence_level=confidence,
        document_count=1,
        total_word_count=total_word_count,
        last_trained_at=timestamp,
        evolution_history=[
            EvolutionEntry(
                timestamp=timestamp,
                document_id=document_id,
                document_name=meta.file_name,
                writing_type=meta.writing_type,
                changes_made=[th.INITIAL_PROFILE_CHANGE],
                confidence_delta=confidence,
                confidence_level=confidence,
                total_word_count=total_word_count,
                total_documents=1,
            )
        ],
    )


@dataclass(frozen=True)
class FingerprintDelta:
    dimension: str
    delta: float
    significance: str  # high, medium or low


_COMPARED_DIMENSIONS: Dict[str, Callable[[VoiceFingerprint], float]] = {
    "formality": lambda fp: fp.voice.formality_score,
    "sentence-length": lambda fp: fp.rhythm.avg_sentence_length,
    "hedge-usage": lambda fp: fp.voice.hedge_density * 100,
    "word-complexity": lambda fp: fp.vocabulary.complex_word_ratio * 100,
    "personal-voice": lambda fp: fp.voice.personal_pronoun_rate * 100,
}


def compare_fingerprints(first: VoiceFingerprint, second: VoiceFingerprint) -> List[FingerprintDelta]:
    """Key differences from ``first`` to ``second``.

    Useful for spotting outlier documents against an aggregate. Density
    dimensions are compared in percentage points.
    """
    differences = []
    for dimension, getter in _COMPARED_DIMENSIONS.items():
        delta = getter(second) - getter(first)
        high, medium = th.COMPARISON_THRESHOLDS[dimension]
        magnitude = abs(delta)
        if magnitude >= high:
            significance = "high"
        elif magnitude >= medium:
            significance = "medium"
        else:
            significance = "low"
        differences.append(FingerprintDelta(dimension, round(delta, 2), significance))
    return differences
