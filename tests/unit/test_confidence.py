"""Tests for confidence scoring, labels, milestones and tiers."""

import pytest

from mirror.voice import thresholds as th
from mirror.voice.confidence import (
    MILESTONES,
    calculate_confidence,
    confidence_label,
    confidence_tier,
    next_milestone,
    profile_label,
)

LABELS = {"Initializing", "Learning", "Developing", "Confident", "Mastered"}


class TestCalculateConfidence:
    """Confidence curve."""

    def test_no_samples_is_zero(self):
        assert calculate_confidence(0, 0) == 0

    def test_single_short_document_is_learning(self):
        score = calculate_confidence(1, 600)
        assert score == 27
        assert confidence_label(score) == "Learning"

    def test_five_documents_is_confident(self):
        score = calculate_confidence(5, 5000)
        assert score == 71
        assert confidence_label(score) == "Confident"

    def test_fifteen_documents_is_mastered(self):
        score = calculate_confidence(15, 15000)
        assert score == 88
        assert confidence_label(score) == "Mastered"

    def test_bounded(self):
        assert calculate_confidence(10_000, 10_000_000) <= 100
        assert calculate_confidence(-3, -100) == 0

    def test_monotonic_in_documents_and_words(self):
        scores = [calculate_confidence(d, d * 800) for d in range(30)]
        assert scores == sorted(scores)
        words = [calculate_confidence(3, w) for w in range(0, 20000, 500)]
        assert words == sorted(words)


class TestConfidenceLabel:
    """Band boundaries."""

    @pytest.mark.parametrize("score,label", [
        (0, "Initializing"),
        (24, "Initializing"),
        (25, "Learning"),
        (44, "Learning"),
        (45, "Developing"),
        (64, "Developing"),
        (65, "Confident"),
        (84, "Confident"),
        (85, "Mastered"),
        (100, "Mastered"),
    ])
    def test_boundaries(self, score, label):
        assert confidence_label(score) == label

    def test_every_score_has_exactly_one_label(self):
        for score in range(101):
            assert confidence_label(score) in LABELS

    @pytest.mark.parametrize("score", [-1, 101, 250])
    def test_out_of_range_raises(self, score):
        with pytest.raises(ValueError):
            confidence_label(score)

    def test_missing_profile_label(self):
        assert profile_label(None) == "Not Started"
        assert profile_label(30) == "Learning"


class TestMilestones:
    """Next milestone lookup."""

    def test_first_milestone(self):
        milestone = next_milestone(0)
        assert milestone.target == 25
        assert milestone.label == "Learning"

    def test_reaching_target_moves_on(self):
        assert next_milestone(25).target == 45
        assert next_milestone(64).target == 65

    def test_complete_returns_last(self):
        assert next_milestone(100) == MILESTONES[-1]
        assert MILESTONES[-1].target == 100

    def test_targets_ascending(self):
        targets = [m.target for m in MILESTONES]
        assert targets == [25, 45, 65, 85, 100]


class TestTiers:
    """Readiness tiers."""

    @pytest.mark.parametrize("score,tier", [
        (0, "none"),
        (1, "developing"),
        (44, "developing"),
        (45, "emerging"),
        (64, "emerging"),
        (65, "established"),
        (84, "established"),
        (85, "strong"),
        (100, "strong"),
    ])
    def test_tier_boundaries(self, score, tier):
        assert confidence_tier(score) == tier

    def test_tiers_share_band_boundaries(self):
        band_bounds = {bound for bound, _ in th.CONFIDENCE_BANDS}
        for bound, tier in th.CONFIDENCE_TIERS:
            if tier != "developing":
                assert bound in band_bounds
                assert confidence_tier(bound - 1) != tier
