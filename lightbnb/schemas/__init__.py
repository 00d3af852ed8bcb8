"""
Pydantic schemas for search criteria, inserts and result rows.
"""

# Property schemas
from .property import (
    SearchCriteria,
    PropertyCreate,
    PropertyListing
)

# User schemas
from .user import (
    UserCreate,
    UserRecord
)

# Reservation schemas
from .reservation import ReservationSummary

__all__ = [
    # Property schemas
    "SearchCriteria",
    "PropertyCreate",
    "PropertyListing",

    # User schemas
    "UserCreate",
    "UserRecord",

    # Reservation schemas
    "ReservationSummary",
]
