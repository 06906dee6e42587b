"""Tests for squad signup email validation."""

import pytest

from shoresquad.app.signup import SignupError, validate_email


class TestValidateEmail:
    def test_valid_trimmed(self):
        assert validate_email("  turtle@reef.org  ") == "turtle@reef.org"

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_required(self, text):
        with pytest.raises(SignupError, match="Email is required"):
            validate_email(text)

    @pytest.mark.parametrize(
        "text", ["turtle", "turtle@reef", "turtle @reef.org", "@reef.org", "a@b@c.d e"]
    )
    def test_invalid(self, text: str):
        with pytest.raises(SignupError, match="valid email"):
            validate_email(text)
