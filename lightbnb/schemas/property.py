"""
Pydantic schemas for property search criteria, inserts and listing rows.
Prices are supplied in dollars and stored in cents.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
from decimal import Decimal


class SearchCriteria(BaseModel):
    """
    Optional filters for a property search.
    Every field is independent; a missing field applies no constraint.
    """

    model_config = ConfigDict(frozen=True)

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="Partial, case-insensitive city match",
        examples=["Vancouver"]
    )

    owner_id: Optional[int] = Field(
        None,
        description="Only listings owned by this user",
        examples=[1]
    )

    minimum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Minimum nightly cost in dollars",
        examples=[50]
    )

    maximum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Maximum nightly cost in dollars",
        examples=[150]
    )

    minimum_rating: Optional[Decimal] = Field(
        None,
        ge=1,
        le=5,
        description="Minimum average review rating (1-5)",
        examples=[4]
    )

    @field_validator(
        'city', 'owner_id', 'minimum_price_per_night', 'maximum_price_per_night', 'minimum_rating',
        mode='before'
    )
    @classmethod
    def blank_is_absent(cls, v):
        """Treat an empty or whitespace-only value, as sent by a blank form field, as no constraint."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @model_validator(mode='after')
    def validate_price_range(self):
        """Validate that the price range is not inverted."""
        if self.minimum_price_per_night is not None and self.maximum_price_per_night is not None:
            if self.minimum_price_per_night > self.maximum_price_per_night:
                raise ValueError("Minimum price cannot be greater than maximum price")
        return self


class PropertyCreate(BaseModel):
    """Schema for inserting a new listing."""

    owner_id: int = Field(..., description="ID of the owning user")

    title: str = Field(..., min_length=1, max_length=255)

    description: str = Field("", max_length=5000)

    thumbnail_photo_url: str = Field(..., max_length=255)

    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: Decimal = Field(
        ...,
        ge=0,
        description="Nightly cost in dollars",
        examples=[120.50]
    )

    parking_spaces: int = Field(0, ge=0)

    number_of_bathrooms: int = Field(0, ge=0)

    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., min_length=1, max_length=255)

    street: str = Field(..., min_length=1, max_length=255)

    city: str = Field(..., min_length=1, max_length=255)

    province: str = Field(..., min_length=1, max_length=255)

    post_code: str = Field(..., min_length=1, max_length=255)

    active: bool = True

    @field_validator('title', 'city')
    @classmethod
    def strip_text(cls, v):
        """Strip surrounding whitespace and reject blank values."""
        if not v.strip():
            raise ValueError("Value cannot be blank")
        return v.strip()


class PropertyListing(BaseModel):
    """
    A stored listing plus its derived average review rating.
    average_rating is None for listings without reviews.
    """

    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int = Field(..., description="Nightly cost in cents")
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool = True
    average_rating: Optional[Decimal] = None
