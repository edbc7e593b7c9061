"""Tests for voice fingerprint extraction."""

import pytest

from mirror.voice.extractor import VoiceFingerprintExtractor, extract_fingerprint
from mirror.voice.fingerprint import VoiceFingerprint
from mirror.voice.thresholds import FINGERPRINT_VERSION


class TestDeterminism:
    """Same input, same output."""

    def test_identical_text_identical_fingerprint(self, sample_text):
        first = extract_fingerprint(sample_text)
        second = extract_fingerprint(sample_text)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_meta_has_no_timestamp(self, sample_text):
        meta = extract_fingerprint(sample_text).to_dict()["meta"]
        assert set(meta) == {"sample_word_count", "sample_sentence_count", "version"}
        assert meta["version"] == FINGERPRINT_VERSION


class TestEmptyInput:
    """Degenerate input yields zeros, never an error."""

    @pytest.mark.parametrize("text", ["", "   \n\n  ", "... --- !!!"])
    def test_no_words_gives_zero_fingerprint(self, text):
        assert extract_fingerprint(text) == VoiceFingerprint()

    def test_single_word(self):
        fp = extract_fingerprint("Hello")
        assert fp.meta.sample_word_count == 1
        assert fp.meta.sample_sentence_count == 1
        assert fp.rhythm.avg_sentence_length == 1.0
        assert fp.rhythm.sentence_variation == 0.0


class TestRhythm:
    """Sentence and paragraph statistics."""

    def test_sentence_lengths(self):
        fp = extract_fingerprint("I think this works. We tested it twice.")
        assert fp.meta.sample_word_count == 8
        assert fp.meta.sample_sentence_count == 2
        assert fp.rhythm.avg_sentence_length == 4.0
        assert fp.rhythm.sentence_variation == 0.0
        assert fp.rhythm.short_sentence_ratio == 1.0
        assert fp.rhythm.long_sentence_ratio == 0.0

    def test_population_standard_deviation(self):
        # Lengths 2 and 6: mean 4, population std 2.
        fp = extract_fingerprint("Go now. Then come back to the house.")
        assert fp.rhythm.avg_sentence_length == 4.0
        assert fp.rhythm.sentence_variation == 2.0

    def test_abbreviations_and_decimals_do_not_split(self):
        fp = extract_fingerprint("Dr. Smith measured 3.5 liters. It was enough.")
        assert fp.meta.sample_sentence_count == 2

    def test_paragraph_lengths(self):
        fp = extract_fingerprint("One two three.\n\nFour five six seven eight.")
        assert fp.rhythm.avg_paragraph_length == 4.0
        assert fp.rhythm.paragraph_variation == 1.0

    def test_ratios_within_unit_interval(self, sample_text):
        rhythm = extract_fingerprint(sample_text).rhythm
        assert 0.0 <= rhythm.short_sentence_ratio <= 1.0
        assert 0.0 <= rhythm.long_sentence_ratio <= 1.0


class TestVocabulary:
    """Word choice features."""

    def test_top_words_exclude_stopwords(self):
        fp = extract_fingerprint("The the the apple is on the table.")
        assert fp.vocabulary.top_words == ["apple", "table"]

    def test_top_words_ties_keep_first_occurrence(self):
        fp = extract_fingerprint("apple banana cherry banana apple")
        assert fp.vocabulary.top_words == ["apple", "banana", "cherry"]

    def test_top_words_exclude_numbers(self):
        fp = extract_fingerprint("2024 2024 2024 report")
        assert fp.vocabulary.top_words == ["report"]

    def test_top_words_limit(self):
        text = " ".join(f"word{chr(97 + i)}" for i in range(26))
        fp = VoiceFingerprintExtractor(top_words_limit=5).extract(text)
        assert len(fp.vocabulary.top_words) == 5

    def test_contraction_ratio(self):
        fp = extract_fingerprint("I don't know. It's fine.")
        assert fp.vocabulary.contraction_ratio == pytest.approx(2 / 5, abs=1e-4)

    def test_rarity_and_unique_count(self):
        fp = extract_fingerprint("red red blue")
        assert fp.vocabulary.unique_word_count == 2
        assert fp.vocabulary.rarity_score == pytest.approx(2 / 3, abs=1e-4)


class TestVoice:
    """Tone markers."""

    def test_contractions_lower_formality(self):
        casual = extract_fingerprint("I don't think it's going to work, and we can't stop it.")
        plain = extract_fingerprint("I do not think it is going to work, and we cannot stop it.")
        assert casual.voice.formality_score < plain.voice.formality_score

    def test_formal_text_scores_higher_than_casual(self, formal_text):
        formal = extract_fingerprint(formal_text)
        casual = extract_fingerprint("Hey! I'm here. You're late. We're done. Let's go.")
        assert formal.voice.formality_score > casual.voice.formality_score

    def test_formality_within_unit_interval(self, sample_text, formal_text):
        for text in (sample_text, formal_text, "I'm sure you're right, it's fine."):
            score = extract_fingerprint(text).voice.formality_score
            assert 0.0 <= score <= 1.0

    def test_hedges_and_pronouns(self):
        fp = extract_fingerprint("I think this works. We tested it twice.")
        assert fp.voice.hedge_density == pytest.approx(1 / 8)
        assert fp.voice.personal_pronoun_rate == pytest.approx(2 / 8)

    def test_pronoun_inside_word_not_counted(self):
        fp = extract_fingerprint("Mine is the image of music.")
        assert fp.voice.personal_pronoun_rate == pytest.approx(1 / 6, abs=1e-4)

    def test_latin_abbreviation_not_a_pronoun(self):
        fp = extract_fingerprint("Use simple tools, i.e. hammers and saws.")
        assert fp.voice.personal_pronoun_rate == 0.0
        assert fp.rhetoric.example_usage_rate == 1.0

    def test_sentence_final_pronoun_counted(self):
        fp = extract_fingerprint("They asked me. Then they left.")
        assert fp.voice.personal_pronoun_rate > 0.0

    def test_passive_sentence(self):
        assert extract_fingerprint("The report was written by the team.").voice.active_voice_ratio == 0.0
        assert extract_fingerprint("The team wrote the report.").voice.active_voice_ratio == 1.0

    def test_assertive_words(self):
        fp = extract_fingerprint("Clearly this is right. Obviously it works.")
        assert fp.voice.assertive_density == pytest.approx(2 / 7, abs=1e-4)


class TestPunctuation:
    """Punctuation rates per 1000 words."""

    def test_question_rate(self):
        fp = extract_fingerprint("Why? Because.")
        assert fp.punctuation.question_rate == 500.0

    def test_dash_rate(self):
        fp = extract_fingerprint("Fast — really fast.")
        assert fp.punctuation.dash_rate == pytest.approx(1000 / 3, abs=1e-3)

    def test_hyphenated_word_is_not_a_dash(self):
        fp = extract_fingerprint("A well-known fact.")
        assert fp.punctuation.dash_rate == 0.0

    def test_ellipsis_and_semicolon(self):
        fp = extract_fingerprint("Wait... then go; stop.")
        assert fp.punctuation.ellipsis_rate == 250.0
        assert fp.punctuation.semicolon_rate == 250.0


class TestRhetoric:
    """Argument structure."""

    def test_transition_rate_per_sentence(self):
        fp = extract_fingerprint("However, it failed. We tried again. Therefore, it worked.")
        assert fp.rhetoric.transition_word_rate == pytest.approx(2 / 3, abs=1e-4)

    def test_example_rate(self):
        fp = extract_fingerprint("For example, apples. Pears too.")
        assert fp.rhetoric.example_usage_rate == 0.5

    def test_question_opener_per_paragraph(self):
        fp = extract_fingerprint("Why now? Because.\n\nIt matters.")
        assert fp.rhetoric.question_opener_rate == 0.5

    def test_list_markers(self):
        fp = extract_fingerprint("Steps:\n- first\n- second\n\nDone.")
        assert fp.rhetoric.list_usage_rate == 1.0

    def test_emphasis_patterns(self):
        fp = extract_fingerprint("This is **very** important.")
        assert fp.rhetoric.emphasis_patterns == ["bold-markdown"]

    def test_all_caps_needs_three(self):
        assert extract_fingerprint("NASA and ESA work.").rhetoric.emphasis_patterns == []
        fp = extract_fingerprint("NASA, ESA and JAXA met the CEO.")
        assert fp.rhetoric.emphasis_patterns == ["all-caps"]
