"""Aggregate voice profile and its evolution log."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .fingerprint import VoiceFingerprint


@dataclass(frozen=True)
class DocumentMeta:
    """Metadata supplied by the ingestion step alongside a document."""

    file_name: str = "Unknown"
    writing_type: str = "other"
    word_count: int = 0


@dataclass
class EvolutionEntry:
    """One learning event and how it moved the profile."""

    timestamp: str
    document_id: str
    document_name: str
    writing_type: str
    changes_made: List[str]
    confidence_delta: int
    confidence_level: int
    total_word_count: int
    total_documents: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "document_id": self.document_id,
            "document_name": self.document_name,
            "writing_type": self.writing_type,
            "changes_made": list(self.changes_made),
            "confidence_delta": self.confidence_delta,
            "confidence_level": self.confidence_level,
            "total_word_count": self.total_word_count,
            "total_documents": self.total_documents,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvolutionEntry":
        # Older rows may lack the enriched fields.
        return cls(
            timestamp=data.get("timestamp", ""),
            document_id=data.get("document_id", ""),
            document_name=data.get("document_name") or "Unknown",
            writing_type=data.get("writing_type") or "other",
            changes_made=list(data.get("changes_made") or []),
            confidence_delta=int(data.get("confidence_delta") or 0),
            confidence_level=int(data.get("confidence_level") or 0),
            total_word_count=int(data.get("total_word_count") or 0),
            total_documents=int(data.get("total_documents") or 0),
        )


@dataclass
class VoiceProfile:
    """A user's learned voice: the running merge of every learned document."""

    user_id: str
    aggregate_fingerprint: VoiceFingerprint
    confidence_level: int
    document_count: int
    total_word_count: int
    last_trained_at: Optional[str] = None
    evolution_history: List[EvolutionEntry] = field(default_factory=list)

    @property
    def latest_evolution(self) -> Optional[EvolutionEntry]:
        return self.evolution_history[-1] if self.evolution_history else None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "user_id": self.user_id,
            "aggregate_fingerprint": self.aggregate_fingerprint.to_dict(),
            "confidence_level": self.confidence_level,
            "document_count": self.document_count,
            "total_word_count": self.total_word_count,
            "last_trained_at": self.last_trained_at,
            "evolution_history": [e.to_dict() for e in self.evolution_history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VoiceProfile":
        """Deserialize from dictionary.

        Raises:
            FingerprintValidationError: If the stored fingerprint is malformed.
        """
        return cls(
            user_id=data.get("user_id", ""),
            aggregate_fingerprint=VoiceFingerprint.from_dict(data.get("aggregate_fingerprint")),
            confidence_level=int(data.get("confidence_level") or 0),
            document_count=int(data.get("document_count") or 0),
            total_word_count=int(data.get("total_word_count") or 0),
            last_trained_at=data.get("last_trained_at"),
            evolution_history=[
                EvolutionEntry.from_dict(e) for e in data.get("evolution_history") or []
            ],
        )
