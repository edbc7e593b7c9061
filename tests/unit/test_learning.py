"""Tests for the learning flow."""

from datetime import datetime, timezone

import pytest

from mirror.config import LearningConfig
from mirror.voice.learning import VoiceLearner
from mirror.voice.repository import InMemoryProfileRepository, JsonFileProfileRepository


@pytest.fixture
def repository():
    return InMemoryProfileRepository()


@pytest.fixture
def learner(repository):
    return VoiceLearner(repository)


class TestLearn:
    """learn()"""

    def test_short_text_rejected(self, learner, repository):
        result = learner.learn("u1", "far too short to learn from", source="manual-upload")
        assert not result.learned
        assert result.error == "Text too short (6/50 words)"
        assert repository.get("u1") is None
        assert len(repository) == 0

    def test_chat_has_lower_minimum(self, learner):
        text = " ".join(["We shipped the release today and everyone seemed happy"] * 3)
        assert learner.learn("u1", text, source="manual-upload").learned is False
        assert learner.learn("u1", text, source="lex-chat").learned is True

    def test_unknown_source_uses_default_minimum(self, learner):
        text = " ".join(["word"] * 30)
        assert learner.learn("u1", text, source="fax").learned is True

    def test_disabled(self, repository, sample_text):
        learner = VoiceLearner(repository, LearningConfig(enabled=False))
        result = learner.learn("u1", sample_text)
        assert not result.learned
        assert result.error == "Live learning disabled"
        assert len(repository) == 0

    def test_invalid_writing_type(self, learner, repository, sample_text):
        result = learner.learn("u1", sample_text, writing_type="poetry")
        assert not result.learned
        assert "poetry" in result.error
        assert len(repository) == 0

    def test_first_document(self, learner, repository, sample_text):
        result = learner.learn("u1", sample_text, source="cover-letter")
        assert result.learned
        assert result.is_first_document
        assert result.confidence_gain == result.confidence_level
        assert result.changes_made == ["initial profile created"]

        profile = repository.get("u1")
        assert profile.user_id == "u1"
        assert profile.document_count == 1
        entry = profile.evolution_history[0]
        assert entry.document_id == "cover-letter-1"
        assert entry.document_name == "Cover Letter"
        assert entry.writing_type == "professional"

    def test_second_document(self, learner, repository, sample_text, formal_text):
        first = learner.learn("u1", sample_text)
        second = learner.learn("u1", formal_text, document_id="doc-b", title="Memo")
        assert second.learned
        assert not second.is_first_document
        assert second.confidence_level >= first.confidence_level
        assert second.confidence_gain == second.confidence_level - first.confidence_level

        profile = repository.get("u1")
        assert profile.document_count == 2
        assert [e.document_id for e in profile.evolution_history] == ["manual-upload-1", "doc-b"]
        assert profile.latest_evolution.document_name == "Memo"

    def test_chat_defaults_to_personal(self, learner, repository, sample_text):
        learner.learn("u1", sample_text, source="lex-chat")
        entry = repository.get("u1").latest_evolution
        assert entry.writing_type == "personal"
        assert entry.document_name == "Lex Chat"

    def test_timestamp_override(self, learner, repository, sample_text):
        now = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        learner.learn("u1", sample_text, now=now)
        assert repository.get("u1").last_trained_at == now.isoformat()

    def test_users_are_independent(self, learner, repository, sample_text):
        learner.learn("u1", sample_text)
        learner.learn("u2", sample_text)
        learner.learn("u2", sample_text)
        assert repository.get("u1").document_count == 1
        assert repository.get("u2").document_count == 2

    def test_users_with_similar_ids_stay_separate(self, tmp_path, sample_text):
        learner = VoiceLearner(JsonFileProfileRepository(tmp_path))
        learner.learn("ann/b", sample_text)
        result = learner.learn("ann_b", sample_text)
        assert result.is_first_document
        assert learner.status("ann/b").document_count == 1
        assert learner.status("ann_b").document_count == 1


class TestStatus:
    """status()"""

    def test_not_started(self, learner):
        status = learner.status("nobody")
        assert not status.has_profile
        assert status.status == "not_started"
        assert status.confidence_label == "Not Started"
        assert status.confidence_level == 0
        assert status.recommendations

    def test_after_learning(self, learner, sample_text):
        learner.learn("u1", sample_text, document_id="a")
        learner.learn("u1", sample_text, document_id="b")
        status = learner.status("u1")
        assert status.has_profile
        assert status.status == "learning"
        assert status.document_count == 2
        assert status.voice_description.startswith("This voice")
        assert status.voice_summary.endswith(".")
        assert status.highlights
        assert status.next_milestone.target > status.confidence_level
        assert [e.document_id for e in status.evolution_history] == ["b", "a"]
        assert len(status.recommendations) <= 3

    def test_recent_limit(self, learner, sample_text):
        for doc_id in "abcd":
            learner.learn("u1", sample_text, document_id=doc_id)
        assert [e.document_id for e in learner.status("u1", recent=2).evolution_history] == ["d", "c"]
        full = learner.status("u1", full_history=True).evolution_history
        assert [e.document_id for e in full] == ["a", "b", "c", "d"]


class TestReset:
    """reset()"""

    def test_reset_deletes_profile(self, learner, repository, sample_text):
        learner.learn("u1", sample_text)
        assert learner.reset("u1") is True
        assert repository.get("u1") is None
        assert learner.status("u1").status == "not_started"

    def test_reset_without_profile(self, learner):
        assert learner.reset("u1") is False
