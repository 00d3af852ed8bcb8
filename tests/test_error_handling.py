"""
Tests for the exception hierarchy.
"""

import pytest

from lightbnb.utils.exceptions import (
    LightBnBError,
    ValidationError,
    ConflictError,
    InvalidLimitError,
    DuplicateResourceError
)


class TestExceptions:
    """Error codes and messages."""

    def test_invalid_limit(self):
        error = InvalidLimitError(0)

        assert isinstance(error, ValidationError)
        assert isinstance(error, LightBnBError)
        assert error.error_code == "VALIDATION_ERROR"
        assert error.detail == "Limit must be a positive integer, got 0"
        assert str(error) == error.detail

    def test_duplicate_resource(self):
        error = DuplicateResourceError("User", "devin@ymail.com")

        assert isinstance(error, ConflictError)
        assert error.error_code == "CONFLICT"
        assert error.detail == "User with identifier 'devin@ymail.com' already exists"

    def test_base_error_without_code(self):
        error = LightBnBError("something failed")

        assert error.error_code is None
        with pytest.raises(LightBnBError, match="something failed"):
            raise error
