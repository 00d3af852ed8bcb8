"""
Pydantic schema for a guest's reservation rows.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal


class ReservationSummary(BaseModel):
    """A reservation joined with its property and the property's average rating."""

    id: int
    property_id: int
    title: str
    cost_per_night: int = Field(..., description="Nightly cost in cents")
    start_date: date
    end_date: date
    thumbnail_photo_url: str
    average_rating: Optional[Decimal] = None
