# Area: Difficulty Tests
"""Tests for DifficultyClassifier — multipliers, validation, suggestions."""

import pytest

from trivia_engine._difficulty.classifier import DifficultyClassifier, tokenize
from trivia_engine._difficulty.keywords import (
    EMPTY_DESCRIPTION_ERROR,
    GENERAL_DIFFICULTY_SUGGESTIONS,
    MISSING_KEYWORD_SUGGESTIONS,
    TOO_LONG_ERROR,
    TOO_SHORT_ERROR,
    VAGUE_DESCRIPTION_SUGGESTION,
    DifficultyTier,
)
from trivia_engine._difficulty.labels import CustomDifficulty, StandardDifficulty
from trivia_engine.errors import DifficultyLabelError, DifficultyValidationError


class TestStandardLabels:
    """Tests for standard labels mapping to fixed constants."""

    @pytest.mark.parametrize("label,expected", [
        ("easy", 1.0),
        ("medium", 1.5),
        ("hard", 2.0),
    ])
    def test_fixed_multipliers(self, label, expected):
        """Test that each standard label always gives its constant."""
        classifier = DifficultyClassifier()
        for _ in range(3):
            assert classifier.classify(label) == expected

    def test_case_and_whitespace_insensitive(self):
        """Test that case and padding do not change the multiplier."""
        classifier = DifficultyClassifier()
        assert classifier.classify("  HARD ") == 2.0

    def test_typed_value_accepted(self):
        """Test that a StandardDifficulty value can be classified directly."""
        assert DifficultyClassifier().classify(StandardDifficulty.MEDIUM) == 1.5

    def test_standard_label_has_no_tier(self):
        """Test that classify_tier returns None for standard labels."""
        assert DifficultyClassifier().classify_tier("easy") is None

    def test_unknown_label_raises(self):
        """Test that an unknown label raises DifficultyLabelError."""
        with pytest.raises(DifficultyLabelError):
            DifficultyClassifier().classify("impossible")

    def test_empty_custom_label_raises(self):
        """Test that a custom: label with no text raises."""
        with pytest.raises(DifficultyLabelError):
            DifficultyClassifier().classify("custom:   ")


class TestCustomClassification:
    """Tests for keyword tiers of custom: descriptions."""

    def test_expert_keyword(self):
        """Test that an expert keyword gives 2.5."""
        assert DifficultyClassifier().classify("custom:expert level quantum physics") == 2.5

    def test_no_keyword_falls_back_to_university(self):
        """Test that text with no keyword falls back to the University tier."""
        classifier = DifficultyClassifier()
        assert classifier.classify("custom:just a topic") == 2.0
        assert classifier.classify_tier("custom:just a topic") is DifficultyTier.UNIVERSITY

    @pytest.mark.parametrize("text", [
        "university physics",
        "UNIVERSITY Physics",
        "first-year University, chemistry",
        "questions for a (university) quiz night",
    ])
    def test_university_regardless_of_case_and_context(self, text):
        """Test that the keyword matches whatever its case or neighbours."""
        assert DifficultyClassifier().classify(f"custom:{text}") == 2.0

    def test_higher_precedence_keyword_wins(self):
        """Test that the highest-precedence tier wins when several match."""
        classifier = DifficultyClassifier()
        assert classifier.classify("custom:advanced university chemistry") == 2.5
        assert classifier.classify("custom:basic college algebra") == 2.0

    def test_high_school_phrase(self):
        """Test that the two-word phrase "high school" is matched."""
        assert DifficultyClassifier().classify("custom:high school history") == 1.5

    def test_high_and_school_apart_do_not_match(self):
        """Test that phrase words must be adjacent and in order."""
        classifier = DifficultyClassifier()
        assert classifier.detect_tier("school of high achievers") is None

    def test_elementary_keywords(self):
        """Test that elementary keywords give 1.0."""
        classifier = DifficultyClassifier()
        assert classifier.classify("custom:beginner cooking") == 1.0
        assert classifier.classify("custom:simple maths") == 1.0

    def test_substring_is_not_a_keyword(self):
        """Test that keywords match whole words only."""
        # "basics" is not "basic"; "mastery" is not "master"
        classifier = DifficultyClassifier()
        assert classifier.detect_tier("basics mastery") is None

    def test_configurable_default_tier(self):
        """Test that the fallback tier can be changed."""
        classifier = DifficultyClassifier(default_tier=DifficultyTier.HIGH_SCHOOL)
        assert classifier.classify("custom:cats") == 1.5

    def test_multiplier_never_zero(self):
        classifier = DifficultyClassifier()
        for text in ["x", "???", "1234", "the the the"]:
            assert classifier.classify(f"custom:{text}") > 0

    def test_typed_custom_value(self):
        """Test that a CustomDifficulty value can be classified directly."""
        classifier = DifficultyClassifier()
        assert classifier.classify(CustomDifficulty("phd biology")) == 2.5


class TestTokenize:
    """Tests for keyword tokenisation."""

    def test_lowercases_and_strips_punctuation(self):
        """Test that tokens are lower-cased with punctuation stripped."""
        assert tokenize("  Expert, level!  (PhD) ") == ["expert", "level", "phd"]

    def test_empty(self):
        assert tokenize("   ") == []


class TestValidate:
    """Tests for validating free text typed into the settings form."""

    def test_empty(self):
        """Test that empty text gets the empty-description error."""
        result = DifficultyClassifier().validate("")
        assert result == {"is_valid": False, "error": EMPTY_DESCRIPTION_ERROR}
        assert result["error"] == "Please enter a difficulty description"

    def test_whitespace_only_is_empty(self):
        """Test that whitespace-only text counts as empty."""
        result = DifficultyClassifier().validate("    ")
        assert result["error"] == EMPTY_DESCRIPTION_ERROR

    def test_too_short(self):
        """Test that two characters are below the minimum."""
        result = DifficultyClassifier().validate("ab")
        assert result["is_valid"] is False
        assert result["error"] == TOO_SHORT_ERROR

    def test_three_chars_is_enough(self):
        """Test that three characters meet the minimum."""
        assert DifficultyClassifier().validate("phd")["is_valid"] is True

    def test_too_long(self):
        """Test that 201 characters exceed the maximum."""
        result = DifficultyClassifier().validate("a" * 201)
        assert result["is_valid"] is False
        assert result["error"] == TOO_LONG_ERROR

    def test_max_length_accepted(self):
        """Test that exactly 200 characters are accepted."""
        assert DifficultyClassifier().validate("a" * 200)["is_valid"] is True

    def test_keyword_text_is_clean(self):
        """Test that text with a keyword has no error and no suggestions."""
        result = DifficultyClassifier().validate("beginner cooking")
        assert result == {"is_valid": True}

    def test_no_keyword_is_valid_with_suggestions(self):
        """Test that text without a keyword is valid with soft suggestions."""
        result = DifficultyClassifier().validate("tricky stuff")
        assert result["is_valid"] is True
        assert "error" not in result
        assert result["suggestions"] == MISSING_KEYWORD_SUGGESTIONS

    @pytest.mark.parametrize("text", ["!!!", "the and the", "a b c"])
    def test_filler_text_gets_vagueness_hint(self, text):
        """Test that filler-only text stays valid but leads with a vagueness hint."""
        result = DifficultyClassifier().validate(text)
        assert result["is_valid"] is True
        assert result["suggestions"][0] == VAGUE_DESCRIPTION_SUGGESTION
        assert result["suggestions"][1:] == MISSING_KEYWORD_SUGGESTIONS

    def test_hard_failures_carry_no_suggestions(self):
        """Test that blocking errors come without suggestions."""
        assert "suggestions" not in DifficultyClassifier().validate("ab")


class TestValidateLabelAndParse:
    """Tests for validate_label and parse at the session boundary."""

    def test_standard_label_always_valid(self):
        """Test that standard labels always validate."""
        assert DifficultyClassifier().validate_label("Medium") == {"is_valid": True}

    def test_custom_label_validates_text(self):
        """Test that the text of a custom label is validated."""
        result = DifficultyClassifier().validate_label("custom:ab")
        assert result["is_valid"] is False

    def test_unknown_label_invalid(self):
        """Test that an unknown label is invalid and named in the error."""
        result = DifficultyClassifier().validate_label("nightmare")
        assert result["is_valid"] is False
        assert "nightmare" in result["error"]

    def test_parse_standard(self):
        """Test that parse returns the StandardDifficulty member."""
        assert DifficultyClassifier().parse("hard") is StandardDifficulty.HARD

    def test_parse_custom(self):
        """Test that parse returns a trimmed CustomDifficulty."""
        parsed = DifficultyClassifier().parse("custom:  university physics ")
        assert parsed == CustomDifficulty("university physics")

    def test_parse_rejects_short_custom_text(self):
        """Test that short custom text raises DifficultyValidationError."""
        with pytest.raises(DifficultyValidationError) as exc_info:
            DifficultyClassifier().parse("custom:ab")
        assert str(exc_info.value) == TOO_SHORT_ERROR
        assert exc_info.value.suggestions == []

    def test_parse_rejects_unknown_label(self):
        """Test that parse raises DifficultyLabelError for unknown labels."""
        with pytest.raises(DifficultyLabelError):
            DifficultyClassifier().parse("bogus")

    def test_validation_error_is_value_error(self):
        """Test that validation failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            DifficultyClassifier().parse("custom:x")


class TestSuggestions:
    """Tests for refinement and topic suggestions."""

    def test_tier_refinement(self):
        """Test tier-specific refinement hints for expert text."""
        suggestions = DifficultyClassifier().suggestions_for("expert chess")
        assert "Try adding specific expertise areas" in suggestions

    def test_elementary_uses_generic_refinement(self):
        """Test that tiers without their own hints get the generic ones."""
        suggestions = DifficultyClassifier().suggestions_for("beginner chess")
        assert "Be more specific about the knowledge level" in suggestions

    def test_general_topic_suggestions(self):
        """Test the general examples when no topic is given."""
        assert DifficultyClassifier().topic_suggestions() == GENERAL_DIFFICULTY_SUGGESTIONS

    def test_known_topic(self):
        """Test that a known topic category gets its own examples first."""
        suggestions = DifficultyClassifier().topic_suggestions("Modern History")
        assert suggestions[0] == "basic world history"
        assert suggestions[-3:] == GENERAL_DIFFICULTY_SUGGESTIONS[:3]

    def test_unknown_topic_is_templated(self):
        """Test that an unknown topic gets templated examples."""
        suggestions = DifficultyClassifier().topic_suggestions("Chess")
        assert suggestions[:2] == ["beginner Chess", "intermediate Chess"]

    def test_suggestions_are_copies(self):
        """Test that mutating a returned list does not affect later calls."""
        classifier = DifficultyClassifier()
        classifier.topic_suggestions().append("mutated")
        assert "mutated" not in classifier.topic_suggestions()
