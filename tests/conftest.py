"""Shared fixtures for the voice engine tests."""

import pytest

from mirror.voice.fingerprint import (
    FingerprintMeta,
    RhythmFeatures,
    VocabularyFeatures,
    VoiceFeatures,
    VoiceFingerprint,
)


SAMPLE_TEXT = """I have spent the last five years building data pipelines for a mid-sized logistics company. Honestly, I think the work taught me more about people than about software.

When a shipment goes missing, nobody cares how elegant the code is. They want answers, and they want them quickly. So I learned to write tools that explain themselves. Clear logs, simple dashboards, and plain language reports made the difference.

However, I don't want to overstate it. Perhaps the most important lesson was patience. Systems fail in surprising ways, and teams need time to trust new processes. For example, our first rollout was delayed twice because the warehouse staff had not been consulted."""


FORMAL_TEXT = """The committee has reviewed the proposal in considerable detail. Its recommendations are consistent with the organizational objectives established during the preceding fiscal year. Nevertheless, several administrative considerations require additional clarification before implementation can proceed.

Specifically, the allocation of departmental resources must be documented comprehensively. Furthermore, the evaluation criteria should be communicated to every participating institution. Consequently, the committee recommends a supplementary review of the financial projections."""


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def formal_text():
    return FORMAL_TEXT


@pytest.fixture
def prior_fingerprint():
    """300-word fingerprint averaging 20 words per sentence."""
    return VoiceFingerprint(
        rhythm=RhythmFeatures(avg_sentence_length=20.0, sentence_variation=4.0),
        vocabulary=VocabularyFeatures(
            complex_word_ratio=0.1,
            contraction_ratio=0.01,
            top_words=["data", "team", "pipeline"],
            unique_word_count=150,
        ),
        voice=VoiceFeatures(formality_score=0.5, active_voice_ratio=0.9),
        meta=FingerprintMeta(sample_word_count=300, sample_sentence_count=15),
    )


@pytest.fixture
def new_fingerprint():
    """100-word fingerprint averaging 25 words per sentence."""
    return VoiceFingerprint(
        rhythm=RhythmFeatures(avg_sentence_length=25.0, sentence_variation=6.0),
        vocabulary=VocabularyFeatures(
            complex_word_ratio=0.1,
            contraction_ratio=0.01,
            top_words=["team", "release"],
            unique_word_count=71,
        ),
        voice=VoiceFeatures(formality_score=0.5, active_voice_ratio=0.5),
        meta=FingerprintMeta(sample_word_count=100, sample_sentence_count=4),
    )
