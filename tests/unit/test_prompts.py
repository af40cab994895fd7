"""
Unit tests for interactive session prompts.
"""
import pytest

from greenwall.prompts import IntensityParseError, parse_intensity, prompt_missing, PROMPTS


class TestParseIntensity:
    """Test intensity parsing."""

    def test_parse_decimal(self):
        assert parse_intensity("0.7") == 0.7

    def test_parse_with_whitespace(self):
        assert parse_intensity("  1 \n") == 1.0

    def test_out_of_range_values_kept(self):
        """Values outside [0, 1] are not rejected."""
        assert parse_intensity("2") == 2.0
        assert parse_intensity("-0.5") == -0.5

    def test_non_numeric_rejected(self):
        with pytest.raises(IntensityParseError, match="must be a number"):
            parse_intensity("sometimes")

    def test_empty_rejected(self):
        with pytest.raises(IntensityParseError):
            parse_intensity("")

    def test_nan_rejected(self):
        """NaN would silently mean never; treat it as unparsable."""
        with pytest.raises(IntensityParseError):
            parse_intensity("nan")


class TestPromptMissing:
    """Test prompting for missing session fields."""

    def test_prompts_in_order(self):
        """Should ask username, email, then intensity."""
        answers = iter(["octocat", "octocat@example.com", "0.4"])
        asked = []

        def fake_input(prompt):
            asked.append(prompt)
            return next(answers)

        values = prompt_missing({}, ['user_name', 'user_email', 'intensity'], input_fn=fake_input)

        assert asked == [PROMPTS['user_name'], PROMPTS['user_email'], PROMPTS['intensity']]
        assert values == {
            'user_name': 'octocat',
            'user_email': 'octocat@example.com',
            'intensity': 0.4
        }

    def test_only_missing_fields_prompted(self):
        """Should leave supplied values alone."""
        asked = []

        def fake_input(prompt):
            asked.append(prompt)
            return "0.9"

        original = {'user_name': 'octocat', 'user_email': 'o@example.com'}
        values = prompt_missing(original, ['intensity'], input_fn=fake_input)

        assert asked == [PROMPTS['intensity']]
        assert values['intensity'] == 0.9
        assert 'intensity' not in original

    def test_bad_intensity_answer(self):
        with pytest.raises(IntensityParseError):
            prompt_missing({}, ['intensity'], input_fn=lambda prompt: "lots")
