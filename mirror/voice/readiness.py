"""Readiness assessment and style instructions for downstream generation.

Generation features read a profile as a snapshot; nothing here mutates it.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import thresholds as th
from .confidence import confidence_tier
from .fingerprint import VoiceFingerprint
from .profile import VoiceProfile

STUDIO_TYPES = ("career", "academic", "creative")


@dataclass(frozen=True)
class VoiceReadiness:
    """Whether a profile is good enough to condition generation on."""

    tier: str
    score: int
    is_ready: bool
    can_generate: bool
    should_warn: bool
    should_encourage: bool
    message: str


def assess_voice_readiness(profile: Optional[VoiceProfile]) -> VoiceReadiness:
    """Assess a profile. Generation is always allowed; readiness only
    decides whether the voice is applied and whether to warn."""
    if profile is None:
        return VoiceReadiness(
            tier="none",
            score=0,
            is_ready=False,
            can_generate=True,
            should_warn=True,
            should_encourage=True,
            message="No voice profile yet. Content will use a standard tone.",
        )

    score = profile.confidence_level
    tier = confidence_tier(score)

    if tier == "developing":
        return VoiceReadiness(
            tier, score, False, True, True, True,
            f"Voice profile at {score}%. Need more writing samples for accuracy.",
        )
    if tier == "emerging":
        return VoiceReadiness(
            tier, score, True, True, True, True,
            f"Voice profile at {score}%. Getting closer to your authentic style.",
        )
    if tier == "established":
        return VoiceReadiness(
            tier, score, True, True, False, False,
            f"Voice profile at {score}%. Writing in your established style.",
        )
    if tier == "strong":
        return VoiceReadiness(
            tier, score, True, True, False, False,
            f"Voice profile at {score}%. Writing in your authentic voice.",
        )
    return VoiceReadiness(
        "none", 0, False, True, True, True,
        "Voice profile has no learned samples yet.",
    )


GENERIC_INSTRUCTIONS = {
    "career": (
        "Write in a professional, polished tone suitable for career documents. "
        "Be clear, confident, and action-oriented. No personalized voice profile "
        "is available, so use standard professional formatting."
    ),
    "academic": (
        "Write in a clear, scholarly tone appropriate for academic work. Be precise "
        "and well-structured. No personalized voice profile is available."
    ),
    "creative": (
        "Write in an engaging, expressive style. No personalized voice profile is available."
    ),
}

STUDIO_INSTRUCTIONS = {
    "career": (
        "For this career content: maintain professionalism while preserving the "
        "user's natural voice. If their style is very casual, dial formality up "
        "slightly while keeping their authentic patterns."
    ),
    "academic": (
        "For this academic content: preserve the user's voice while ensuring "
        "scholarly rigor. Keep their sentence patterns but adjust vocabulary for "
        "academic precision."
    ),
    "creative": (
        "For this creative content: fully embrace the user's natural voice and let "
        "their personality come through."
    ),
}


def build_prompt_injection(
    profile: Optional[VoiceProfile],
    readiness: VoiceReadiness,
    studio: str = "career",
) -> str:
    """Style instructions for a text generator.

    Args:
        profile: Learned profile or None.
        readiness: Result of assess_voice_readiness for the same profile.
        studio: career, academic or creative.

    Returns:
        Multi-line instruction block.
    """
    if profile is None or not readiness.is_ready:
        return GENERIC_INSTRUCTIONS.get(
            studio, "Write clearly and professionally. No personalized voice profile is available."
        )

    fp = profile.aggregate_fingerprint
    avg_length = round(fp.rhythm.avg_sentence_length)
    parts = ["Write in the user's authentic voice. Their writing profile:", ""]

    if fp.rhythm.avg_sentence_length > th.SENTENCE_LONG_AVG:
        parts.append(f"- Use longer, flowing sentences (avg {avg_length} words)")
    elif fp.rhythm.avg_sentence_length < th.SENTENCE_SHORT_AVG:
        parts.append(f"- Use short, punchy sentences (avg {avg_length} words)")
    else:
        parts.append(f"- Use medium-length sentences (avg {avg_length} words)")

    if fp.voice.formality_score > th.FORMALITY_FORMAL:
        parts.append("- Maintain a formal, professional tone")
    elif fp.voice.formality_score < th.FORMALITY_CASUAL:
        parts.append("- Use a casual, conversational tone")
    else:
        parts.append("- Balance professional and approachable tone")

    if fp.vocabulary.contraction_ratio > th.CONTRACTIONS_FREE:
        parts.append("- Use contractions naturally (don't, won't, I'm)")
    elif fp.vocabulary.contraction_ratio < th.CONTRACTIONS_AVOIDED:
        parts.append('- Avoid contractions (use "do not" instead of "don\'t")')

    if fp.voice.hedge_density > th.HEDGE_DENSITY_HIGH:
        parts.append("- Include qualifiers and hedging language where appropriate")
    elif fp.voice.assertive_density > th.ASSERTIVE_DENSITY_HIGH:
        parts.append("- Be direct and assertive, avoid hedging")

    if fp.voice.personal_pronoun_rate > th.PERSONAL_PRONOUN_HIGH:
        parts.append("- Write from a first-person perspective")

    if fp.vocabulary.complex_word_ratio > th.COMPLEX_WORDS_SOPHISTICATED:
        parts.append("- Use sophisticated, precise vocabulary")
    elif fp.vocabulary.complex_word_ratio < th.COMPLEX_WORDS_SIMPLE:
        parts.append("- Use clear, accessible language")

    if fp.punctuation.dash_rate > th.DASH_EMPHATIC:
        parts.append("- Use dashes for emphasis and asides")
    if fp.punctuation.question_rate > th.QUESTION_FREQUENT:
        parts.append("- Incorporate rhetorical questions")
    if fp.rhetoric.transition_word_rate > th.TRANSITION_RATE_HIGH:
        parts.append("- Connect ideas with clear transitions")

    if studio in STUDIO_INSTRUCTIONS:
        parts.append("")
        parts.append(STUDIO_INSTRUCTIONS[studio])

    if readiness.tier == "emerging":
        parts.append("")
        parts.append(
            f"Note: voice confidence is {readiness.score}%. "
            "Aim for this style but prioritize clarity."
        )

    return "\n".join(parts)


def recommendations(
    confidence: int,
    fingerprint: Optional[VoiceFingerprint],
    writing_types: Sequence[str] = (),
    document_count: int = 0,
    uploaded_recently: bool = True,
) -> List[str]:
    """Up to three next steps for improving the profile."""
    tips = []

    if confidence < th.LEARNING_CONFIDENCE:
        tips.append("Upload more documents; aim for at least 3 diverse samples")
    elif confidence < th.DEVELOPING_CONFIDENCE:
        tips.append("Your voice is forming. Add more samples to strengthen the pattern")
    elif confidence < th.READY_CONFIDENCE:
        tips.append("Good progress. A few more documents will make your voice reliable")

    total_words = fingerprint.meta.sample_word_count if fingerprint else 0
    if total_words < th.RECOMMENDED_SAMPLE_WORDS:
        tips.append("Include longer documents for better pattern recognition")

    if len({t for t in writing_types if t}) < 2 and document_count >= 3:
        tips.append("Upload different types of writing for a more complete voice profile")

    if not uploaded_recently and confidence < th.MASTERED_CONFIDENCE:
        tips.append("Upload a new document to continue improving your voice profile")

    return tips[:3]
