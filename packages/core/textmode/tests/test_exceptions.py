"""Tests for the exception hierarchy."""

import pytest

from textmode import MalformedFrontmatterError, ModeNotFoundError, TextModeError


class TestExceptionHierarchy:
    def test_malformed_frontmatter_is_text_mode_error(self):
        assert issubclass(MalformedFrontmatterError, TextModeError)

    def test_mode_not_found_is_text_mode_error(self):
        assert issubclass(ModeNotFoundError, TextModeError)

    def test_malformed_frontmatter_is_value_error(self):
        assert issubclass(MalformedFrontmatterError, ValueError)

    def test_mode_not_found_is_lookup_error(self):
        assert issubclass(ModeNotFoundError, LookupError)

    def test_text_mode_error_is_exception(self):
        assert issubclass(TextModeError, Exception)

    def test_message(self):
        assert str(ModeNotFoundError("binary")) == "binary"

    @pytest.mark.parametrize("exc_type", [MalformedFrontmatterError, ModeNotFoundError])
    def test_catch_text_mode_error(self, exc_type):
        with pytest.raises(TextModeError):
            raise exc_type("test")
