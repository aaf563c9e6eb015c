"""Tests for argument checks."""

import pytest

from tabook.utils.checks import check_argument, require_non_null


def test_require_non_null_returns_value():
    assert require_non_null("x") == "x"
    assert require_non_null(0) == 0


def test_require_non_null_names_parameter():
    """The parameter name should appear in the message."""
    with pytest.raises(TypeError, match="word must not be None"):
        require_non_null(None, "word")


def test_check_argument():
    check_argument(True, "unused")
    with pytest.raises(ValueError, match="bad input"):
        check_argument(False, "bad input")
