"""
Property model for rentable listings.
Nightly cost is persisted in integer cents.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class Property(Base):
    """
    A rentable listing owned by a user.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Listing description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Thumbnail image URL"
    )

    cover_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Cover image URL"
    )

    # Pricing in cents
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly cost in cents"
    )

    # Specifications
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Whether the listing is active"
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"


# Composite index for city searches ordered by price
city_cost_index = Index(
    'idx_properties_city_cost',
    Property.city,
    Property.cost_per_night
)
