"""
Utility modules for the LightBnB data access layer.
"""

from .exceptions import (
    LightBnBError,
    ValidationError,
    ConflictError,
    InvalidLimitError,
    DuplicateResourceError
)

from .query_builder import (
    ParameterizedQuery,
    PropertySearchQueryBuilder,
    dollars_to_cents,
    number_placeholders,
    validate_limit
)

__all__ = [
    # Exceptions
    "LightBnBError",
    "ValidationError",
    "ConflictError",
    "InvalidLimitError",
    "DuplicateResourceError",

    # Query building
    "ParameterizedQuery",
    "PropertySearchQueryBuilder",
    "dollars_to_cents",
    "number_placeholders",
    "validate_limit",
]
