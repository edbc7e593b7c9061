"""Render fingerprints as human-readable trait phrases.

Pure threshold-to-phrase tables; identical fingerprints always produce
identical text.
"""

from typing import Dict, List

from . import thresholds as th
from .fingerprint import VoiceFingerprint


def describe_voice(fp: VoiceFingerprint) -> str:
    """One sentence describing the voice, e.g. "This voice is formal and ...".

    Args:
        fp: Document or aggregate fingerprint.

    Returns:
        Descriptive sentence.
    """
    traits: List[str] = []

    formality = fp.voice.formality_score
    if formality > th.FORMALITY_FORMAL:
        traits.append("formal and professional")
    elif formality < th.FORMALITY_CASUAL:
        traits.append("casual and conversational")
    else:
        traits.append("balanced in formality")

    avg_length = fp.rhythm.avg_sentence_length
    if avg_length > th.SENTENCE_LONG_AVG:
        traits.append("uses longer, complex sentences")
    elif avg_length < th.SENTENCE_SHORT_AVG:
        traits.append("prefers short, punchy sentences")

    if fp.rhythm.sentence_variation > th.SENTENCE_VARIATION_DYNAMIC:
        traits.append("varies sentence length dynamically")

    if fp.voice.hedge_density > th.HEDGE_DENSITY_HIGH:
        traits.append("tends to hedge statements")
    elif fp.voice.assertive_density > th.ASSERTIVE_DENSITY_HIGH:
        traits.append("writes with confident assertions")

    if fp.voice.personal_pronoun_rate > th.PERSONAL_PRONOUN_HIGH:
        traits.append("writes with a personal, first-person perspective")

    if fp.punctuation.exclamation_rate > th.EXCLAMATION_EXPRESSIVE:
        traits.append("expressive with exclamations")
    if fp.punctuation.question_rate > th.QUESTION_FREQUENT:
        traits.append("engages readers with questions")
    if fp.punctuation.dash_rate > th.DASH_EMPHATIC:
        traits.append("uses dashes for emphasis")

    if fp.vocabulary.complex_word_ratio > th.COMPLEX_WORDS_SOPHISTICATED:
        traits.append("employs sophisticated vocabulary")
    if fp.vocabulary.contraction_ratio > th.CONTRACTIONS_FREE:
        traits.append("uses contractions naturally")

    if not traits:
        return "This voice has a neutral, standard style."
    return f"This voice is {', '.join(traits)}."


def build_voice_summary(fp: VoiceFingerprint) -> str:
    """Compact "; "-joined trait summary used in prompts and profile views."""
    traits: List[str] = []

    avg_length = fp.rhythm.avg_sentence_length
    if avg_length > th.SENTENCE_LONG_AVG:
        traits.append("prefers longer, flowing sentences")
    elif avg_length < th.SENTENCE_SHORT_AVG:
        traits.append("writes in short, punchy sentences")
    else:
        traits.append("uses medium-length sentences")

    if fp.voice.formality_score > th.FORMALITY_FORMAL:
        traits.append("formal tone")
    elif fp.voice.formality_score < th.FORMALITY_CASUAL:
        traits.append("casual, conversational tone")

    if fp.vocabulary.contraction_ratio > th.CONTRACTIONS_FREE:
        traits.append("uses contractions freely")
    elif fp.vocabulary.contraction_ratio < th.CONTRACTIONS_AVOIDED:
        traits.append("avoids contractions")

    if fp.voice.hedge_density > th.HEDGE_DENSITY_HIGH:
        traits.append("tends to hedge and qualify statements")
    elif fp.voice.assertive_density > th.ASSERTIVE_DENSITY_HIGH:
        traits.append("makes confident, direct assertions")

    if fp.voice.personal_pronoun_rate > th.PERSONAL_PRONOUN_HIGH:
        traits.append("writes with a personal, first-person perspective")

    if fp.vocabulary.complex_word_ratio > th.COMPLEX_WORDS_SOPHISTICATED:
        traits.append("uses sophisticated vocabulary")
    elif fp.vocabulary.complex_word_ratio < th.COMPLEX_WORDS_SIMPLE:
        traits.append("prefers simple, accessible language")

    if fp.punctuation.dash_rate > th.DASH_EMPHATIC:
        traits.append("uses dashes for emphasis")
    if fp.punctuation.question_rate > th.QUESTION_FREQUENT:
        traits.append("frequently poses questions")
    if fp.punctuation.exclamation_rate > th.EXCLAMATION_EXPRESSIVE:
        traits.append("uses exclamation marks expressively")

    if fp.rhetoric.transition_word_rate > th.TRANSITION_RATE_HIGH:
        traits.append("connects ideas with transition words")

    return "; ".join(traits) + "." if traits else "Standard, neutral writing style."


def voice_highlights(fp: VoiceFingerprint) -> List[Dict[str, str]]:
    """Up to five label/value pairs for a dashboard summary."""
    highlights = []

    if fp.voice.formality_score > th.FORMALITY_FORMAL:
        highlights.append({"label": "Tone", "value": "Formal & Professional"})
    elif fp.voice.formality_score < th.FORMALITY_CASUAL:
        highlights.append({"label": "Tone", "value": "Casual & Friendly"})
    else:
        highlights.append({"label": "Tone", "value": "Balanced"})

    if fp.rhythm.avg_sentence_length > th.SENTENCE_LONG_AVG:
        highlights.append({"label": "Sentences", "value": "Longer & Flowing"})
    elif fp.rhythm.avg_sentence_length < th.SENTENCE_SHORT_AVG:
        highlights.append({"label": "Sentences", "value": "Short & Punchy"})
    else:
        highlights.append({"label": "Sentences", "value": "Medium Length"})

    if fp.vocabulary.complex_word_ratio > th.COMPLEX_WORDS_SOPHISTICATED:
        highlights.append({"label": "Vocabulary", "value": "Sophisticated"})
    elif fp.vocabulary.complex_word_ratio < th.COMPLEX_WORDS_SIMPLE:
        highlights.append({"label": "Vocabulary", "value": "Accessible"})
    else:
        highlights.append({"label": "Vocabulary", "value": "Moderate"})

    if fp.voice.assertive_density > th.ASSERTIVE_DENSITY_HIGH:
        highlights.append({"label": "Style", "value": "Confident & Direct"})
    elif fp.voice.hedge_density > th.HEDGE_DENSITY_HIGH:
        highlights.append({"label": "Style", "value": "Thoughtful & Nuanced"})

    if fp.voice.personal_pronoun_rate > th.PERSONAL_PRONOUN_HIGH:
        highlights.append({"label": "Perspective", "value": "Personal & First-Person"})

    return highlights[: th.HIGHLIGHTS_LIMIT]
