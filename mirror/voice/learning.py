"""Learning flow: validate text, fingerprint it, merge it, persist it.

Callers must keep at most one learn() in flight per user; the repository
read-modify-write is not locked here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..config import LearningConfig
from ..utils.logging import get_logger
from ..utils.nlp import count_words
from .aggregator import aggregate
from .confidence import Milestone, next_milestone, profile_label
from .describe import build_voice_summary, describe_voice, voice_highlights
from .extractor import VoiceFingerprintExtractor
from .profile import DocumentMeta, EvolutionEntry
from .readiness import recommendations
from .repository import ProfileRepository
from .thresholds import READY_CONFIDENCE
from .writing_types import is_writing_type

logger = get_logger(__name__)

SOURCE_NAMES = {
    "cover-letter": "Cover Letter",
    "lex-chat": "Lex Chat",
    "resume-upload": "Resume Upload",
    "resume-builder": "Resume Builder",
    "tailored-resume": "Tailored Resume",
    "manual-upload": "Manual Upload",
    "other": "Writing Sample",
}

SOURCE_WRITING_TYPES = {
    "cover-letter": "professional",
    "lex-chat": "personal",
    "resume-upload": "professional",
    "resume-builder": "professional",
    "tailored-resume": "professional",
    "manual-upload": "professional",
    "other": "professional",
}


@dataclass
class LearningResult:
    """Outcome of one learn() call."""
    learned: bool
    confidence_level: Optional[int] = None
    confidence_gain: Optional[int] = None
    confidence_label: Optional[str] = None
    is_first_document: bool = False
    words_analyzed: int = 0
    changes_made: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class VoiceStatus:
    """Dashboard snapshot of a user's voice profile."""
    has_profile: bool
    status: str  # not_started, learning or ready
    confidence_level: int
    confidence_label: str
    document_count: int = 0
    total_word_count: int = 0
    last_trained_at: Optional[str] = None
    next_milestone: Optional[Milestone] = None
    voice_description: Optional[str] = None
    voice_summary: Optional[str] = None
    highlights: List[Dict[str, str]] = field(default_factory=list)
    evolution_history: List[EvolutionEntry] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


class VoiceLearner:
    """Learns users' voices from text and keeps their profiles current."""

    def __init__(
        self,
        repository: ProfileRepository,
        config: Optional[LearningConfig] = None,
    ):
        self.repository = repository
        self.config = config or LearningConfig()
        self.extractor = VoiceFingerprintExtractor(top_words_limit=self.config.top_words_limit)

    def learn(
        self,
        user_id: str,
        text: str,
        source: str = "manual-upload",
        document_id: Optional[str] = None,
        title: Optional[str] = None,
        writing_type: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> LearningResult:
        """Learn one document into the user's profile.

        Args:
            user_id: Profile owner.
            text: Plain extracted text.
            source: Where the text came from; sets the minimum word count.
            document_id: Caller's document id. Defaults to "<source>-<n>".
            title: Display name for the evolution log.
            writing_type: One of the writing types; defaults by source.
            now: Timestamp override.

        Returns:
            LearningResult. Rejected input is reported through ``error``
            rather than raised; repository errors propagate.
        """
        if not self.config.enabled:
            return LearningResult(learned=False, error="Live learning disabled")

        word_count = count_words(text)
        required = self.config.min_words_for(source)
        if word_count < required:
            logger.warning(
                f"Skipping {source} text for {user_id}: {word_count}/{required} words"
            )
            return LearningResult(
                learned=False,
                words_analyzed=word_count,
                error=f"Text too short ({word_count}/{required} words)",
            )

        if writing_type is not None and not is_writing_type(writing_type):
            return LearningResult(learned=False, error=f"Unknown writing type: {writing_type}")

        fingerprint = self.extractor.extract(text)
        prior = self.repository.get(user_id)

        if document_id is None:
            document_id = f"{source}-{prior.document_count + 1 if prior else 1}"
        metadata = DocumentMeta(
            file_name=title or SOURCE_NAMES.get(source, SOURCE_NAMES["other"]),
            writing_type=writing_type or SOURCE_WRITING_TYPES.get(source, "professional"),
            word_count=word_count,
        )

        updated = aggregate(
            prior,
            fingerprint,
            document_id,
            metadata,
            user_id=user_id,
            history_limit=self.config.history_limit,
            top_words_limit=self.config.top_words_limit,
            now=now,
        )
        updated.user_id = user_id
        self.repository.save(updated)

        gain = updated.confidence_level - (prior.confidence_level if prior else 0)
        if prior is None:
            logger.info(f"Created voice profile for {user_id} at {updated.confidence_level}%")
        else:
            logger.info(
                f"Updated voice profile for {user_id}: {updated.document_count} docs, "
                f"{updated.confidence_level}% (+{gain})"
            )

        return LearningResult(
            learned=True,
            confidence_level=updated.confidence_level,
            confidence_gain=gain,
            confidence_label=profile_label(updated.confidence_level),
            is_first_document=prior is None,
            words_analyzed=fingerprint.meta.sample_word_count,
            changes_made=list(updated.latest_evolution.changes_made),
        )

    def status(self, user_id: str, recent: int = 10, full_history: bool = False) -> VoiceStatus:
        """Snapshot for display. History is newest first unless full_history."""
        profile = self.repository.get(user_id)
        if profile is None:
            return VoiceStatus(
                has_profile=False,
                status="not_started",
                confidence_level=0,
                confidence_label=profile_label(None),
                recommendations=[
                    "Upload your first document to start learning your voice",
                    "Include a variety of writing samples for best results",
                    "Aim for at least 3-5 documents with 500+ words each",
                ],
            )

        fp = profile.aggregate_fingerprint
        confidence = profile.confidence_level
        history = profile.evolution_history
        if full_history:
            history = list(history)
        else:
            history = list(reversed(history[-recent:])) if recent > 0 else []

        return VoiceStatus(
            has_profile=True,
            status="ready" if confidence >= READY_CONFIDENCE else "learning",
            confidence_level=confidence,
            confidence_label=profile_label(confidence),
            document_count=profile.document_count,
            total_word_count=profile.total_word_count,
            last_trained_at=profile.last_trained_at,
            next_milestone=next_milestone(confidence),
            voice_description=describe_voice(fp),
            voice_summary=build_voice_summary(fp),
            highlights=voice_highlights(fp),
            evolution_history=history,
            recommendations=recommendations(
                confidence,
                fp,
                writing_types=[e.writing_type for e in profile.evolution_history],
                document_count=profile.document_count,
            ),
        )

    def reset(self, user_id: str) -> bool:
        """Delete the user's profile. Per-document fingerprints are unaffected."""
        deleted = self.repository.delete(user_id)
        if deleted:
            logger.info(f"Reset voice profile for {user_id}")
        return deleted
