"""Confidence scoring, labels, milestones and tiers."""

from dataclasses import dataclass
from typing import Optional

from . import thresholds as th


@dataclass(frozen=True)
class Milestone:
    target: int
    label: str
    documents_needed: int
    words_needed: int


MILESTONES = tuple(Milestone(*row) for row in th.CONFIDENCE_MILESTONES)


def calculate_confidence(document_count: int, total_word_count: int) -> int:
    """Score how well the learned samples represent the writer (0-100).

    Both terms are saturating hyperbolas: early documents move the score
    quickly and later ones only nudge it toward 100.

        1 doc / 500 words     -> 25
        5 docs / 5000 words   -> 71
        15 docs / 15000 words -> 88

    Args:
        document_count: Number of documents learned.
        total_word_count: Cumulative words across those documents.

    Returns:
        Integer confidence in [0, 100].
    """
    docs = max(0, document_count)
    words = max(0, total_word_count)

    doc_factor = th.CONFIDENCE_DOC_WEIGHT * docs / (docs + th.CONFIDENCE_DOC_HALF)
    word_factor = th.CONFIDENCE_WORD_WEIGHT * words / (words + th.CONFIDENCE_WORD_HALF)

    return min(100, max(0, int(round(doc_factor + word_factor))))


def confidence_label(score: int) -> str:
    """Map a confidence score to its band label.

    Raises:
        ValueError: If score is outside [0, 100].
    """
    if score < 0 or score > 100:
        raise ValueError(f"Confidence must be between 0 and 100, got {score}")

    label = th.CONFIDENCE_BANDS[0][1]
    for lower_bound, band_label in th.CONFIDENCE_BANDS:
        if score >= lower_bound:
            label = band_label
    return label


def profile_label(score: Optional[int]) -> str:
    """Label for a possibly missing profile ("Not Started" when absent)."""
    if score is None:
        return th.NOT_STARTED_LABEL
    return confidence_label(score)


def next_milestone(score: int) -> Milestone:
    """First milestone above the current score, or the final one."""
    for milestone in MILESTONES:
        if score < milestone.target:
            return milestone
    return MILESTONES[-1]


def confidence_tier(score: int) -> str:
    """Readiness tier: none, developing, emerging, established or strong."""
    for lower_bound, tier in th.CONFIDENCE_TIERS:
        if score >= lower_bound:
            return tier
    return "none"
