"""Voice fingerprint data model.

A fingerprint is the numeric summary of one document's writing style.
Aggregate profiles store the same structure as their running merge.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List

from .thresholds import FINGERPRINT_VERSION


class FingerprintValidationError(ValueError):
    """Raised when persisted fingerprint data has the wrong shape or range."""


@dataclass(frozen=True)
class RhythmFeatures:
    """Sentence and paragraph length statistics (in words)."""

    avg_sentence_length: float = 0.0
    sentence_variation: float = 0.0  # population std dev
    short_sentence_ratio: float = 0.0
    long_sentence_ratio: float = 0.0
    avg_paragraph_length: float = 0.0
    paragraph_variation: float = 0.0


@dataclass(frozen=True)
class VocabularyFeatures:
    """Word choice statistics."""

    complex_word_ratio: float = 0.0  # 3+ syllables
    contraction_ratio: float = 0.0
    top_words: List[str] = field(default_factory=list)
    unique_word_count: int = 0
    avg_word_length: float = 0.0
    rarity_score: float = 0.0  # unique / total


@dataclass(frozen=True)
class VoiceFeatures:
    """Tone markers. Densities are matches per word."""

    formality_score: float = 0.0
    assertive_density: float = 0.0
    hedge_density: float = 0.0
    qualifier_density: float = 0.0
    personal_pronoun_rate: float = 0.0
    active_voice_ratio: float = 0.0


@dataclass(frozen=True)
class PunctuationFeatures:
    """Punctuation habits, each per 1000 words."""

    exclamation_rate: float = 0.0
    question_rate: float = 0.0
    dash_rate: float = 0.0
    semicolon_rate: float = 0.0
    ellipsis_rate: float = 0.0
    colon_rate: float = 0.0
    comma_rate: float = 0.0


@dataclass(frozen=True)
class RhetoricFeatures:
    """Argument structure.

    Transition and example rates are per sentence; question openers and
    list markers are per paragraph.
    """

    transition_word_rate: float = 0.0
    question_opener_rate: float = 0.0
    list_usage_rate: float = 0.0
    example_usage_rate: float = 0.0
    emphasis_patterns: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FingerprintMeta:
    sample_word_count: int = 0
    sample_sentence_count: int = 0
    version: str = FINGERPRINT_VERSION


# Fields that must stay within [0, 1]; every other number must be >= 0.
UNIT_INTERVAL_FIELDS = frozenset({
    "short_sentence_ratio",
    "long_sentence_ratio",
    "complex_word_ratio",
    "rarity_score",
    "formality_score",
    "active_voice_ratio",
})

SECTIONS = {
    "rhythm": RhythmFeatures,
    "vocabulary": VocabularyFeatures,
    "voice": VoiceFeatures,
    "punctuation": PunctuationFeatures,
    "rhetoric": RhetoricFeatures,
    "meta": FingerprintMeta,
}


@dataclass(frozen=True)
class VoiceFingerprint:
    """Complete stylistic fingerprint of a document or aggregate."""

    rhythm: RhythmFeatures = field(default_factory=RhythmFeatures)
    vocabulary: VocabularyFeatures = field(default_factory=VocabularyFeatures)
    voice: VoiceFeatures = field(default_factory=VoiceFeatures)
    punctuation: PunctuationFeatures = field(default_factory=PunctuationFeatures)
    rhetoric: RhetoricFeatures = field(default_factory=RhetoricFeatures)
    meta: FingerprintMeta = field(default_factory=FingerprintMeta)

    @property
    def word_count(self) -> int:
        return self.meta.sample_word_count

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VoiceFingerprint":
        """Deserialize and validate a stored fingerprint.

        Unknown keys are ignored so older rows with extra fields still load.

        Raises:
            FingerprintValidationError: If a section is missing, a value has
                the wrong type, or a value is out of range.
        """
        if not isinstance(data, dict):
            raise FingerprintValidationError(
                f"Fingerprint must be a mapping, got {type(data).__name__}"
            )
        sections = {}
        for name, section_cls in SECTIONS.items():
            if name not in data:
                raise FingerprintValidationError(f"Missing fingerprint section: {name}")
            sections[name] = _parse_section(section_cls, name, data[name])
        return cls(**sections)


def _parse_section(section_cls, section_name: str, data: Any):
    if not isinstance(data, dict):
        raise FingerprintValidationError(f"Section '{section_name}' must be a mapping")

    values = {}
    for f in fields(section_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        path = f"{section_name}.{f.name}"

        if f.type is str:
            if not isinstance(value, str):
                raise FingerprintValidationError(f"{path} must be a string")
        elif f.type in (int, float):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise FingerprintValidationError(f"{path} must be numeric, got {value!r}")
            if value < 0:
                raise FingerprintValidationError(f"{path} must be >= 0, got {value}")
            if f.name in UNIT_INTERVAL_FIELDS and value > 1:
                raise FingerprintValidationError(f"{path} must be <= 1, got {value}")
            value = int(value) if f.type is int else float(value)
        else:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise FingerprintValidationError(f"{path} must be a list of strings")
            value = list(value)
        values[f.name] = value

    return section_cls(**values)
