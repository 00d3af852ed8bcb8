"""
Custom exception classes for the LightBnB data access layer.
Provides structured errors with a stable error code for the calling layer.
Database and driver errors are never wrapped; they propagate unchanged.
"""

from typing import Optional


class LightBnBError(Exception):
    """Base data access exception class."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class ValidationError(LightBnBError):
    """Invalid argument exception."""

    def __init__(self, detail: str):
        super().__init__(detail, error_code="VALIDATION_ERROR")


class ConflictError(LightBnBError):
    """Resource conflict exception."""

    def __init__(self, detail: str):
        super().__init__(detail, error_code="CONFLICT")


class InvalidLimitError(ValidationError):
    """Result limit is not a positive integer."""

    def __init__(self, limit):
        super().__init__(f"Limit must be a positive integer, got {limit!r}")


class DuplicateResourceError(ConflictError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")
