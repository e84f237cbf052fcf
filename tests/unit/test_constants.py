"""Unit tests for snapselect.constants module.

Tests for centralized constants.
"""
from snapselect.constants import (
    MSG_DISABLED_OPTION,
    MSG_DISABLED_SELECT,
    MSG_NOT_A_SELECT,
    MSG_SINGLE_DESELECT,
    OPTION_SELECTOR,
    SELECT_TAG,
    TIMEOUT_ELEMENT_DEFAULT,
    TIMEOUT_ELEMENT_FAST,
    TIMEOUT_ELEMENT_SLOW,
)


class TestTimeoutConstants:
    """Tests for timeout constants."""

    def test_element_timeout_default(self):
        """Test element timeout is reasonable."""
        assert TIMEOUT_ELEMENT_DEFAULT > 0
        assert TIMEOUT_ELEMENT_DEFAULT <= 60_000

    def test_timeout_ordering(self):
        assert TIMEOUT_ELEMENT_FAST < TIMEOUT_ELEMENT_DEFAULT < TIMEOUT_ELEMENT_SLOW


class TestMessages:
    """Tests for messages matched by substring in existing suites."""

    def test_not_a_select(self):
        assert "Select only works on <select> elements" in MSG_NOT_A_SELECT

    def test_disabled_select_mentions_disabled_option(self):
        assert MSG_DISABLED_OPTION in MSG_DISABLED_SELECT

    def test_single_deselect(self):
        assert "single-select" in MSG_SINGLE_DESELECT


class TestTags:
    def test_lower_case(self):
        assert SELECT_TAG == SELECT_TAG.lower()
        assert OPTION_SELECTOR == "option"
