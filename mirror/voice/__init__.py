"""Voice fingerprint extraction and aggregation."""

from .fingerprint import (
    FingerprintMeta,
    FingerprintValidationError,
    PunctuationFeatures,
    RhetoricFeatures,
    RhythmFeatures,
    VocabularyFeatures,
    VoiceFeatures,
    VoiceFingerprint,
)
from .extractor import (
    VoiceFingerprintExtractor,
    extract_fingerprint,
)
from .profile import (
    DocumentMeta,
    EvolutionEntry,
    VoiceProfile,
)
from .aggregator import (
    FingerprintDelta,
    aggregate,
    compare_fingerprints,
)
from .confidence import (
    calculate_confidence,
    confidence_label,
    next_milestone,
)
from .describe import (
    build_voice_summary,
    describe_voice,
    voice_highlights,
)

__all__ = [
    # Fingerprint
    "FingerprintMeta",
    "FingerprintValidationError",
    "PunctuationFeatures",
    "RhetoricFeatures",
    "RhythmFeatures",
    "VocabularyFeatures",
    "VoiceFeatures",
    "VoiceFingerprint",
    # Extraction
    "VoiceFingerprintExtractor",
    "extract_fingerprint",
    # Profile
    "DocumentMeta",
    "EvolutionEntry",
    "VoiceProfile",
    # Aggregation
    "FingerprintDelta",
    "aggregate",
    "compare_fingerprints",
    # Confidence
    "calculate_confidence",
    "confidence_label",
    "next_milestone",
    # Description
    "build_voice_summary",
    "describe_voice",
    "voice_highlights",
]
