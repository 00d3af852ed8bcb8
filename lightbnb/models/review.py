"""
Property review model. Ratings are averaged per listing at query time.
"""

from sqlalchemy import SmallInteger, Integer, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class PropertyReview(Base):
    """A guest's rating of a property after a reservation."""

    __tablename__ = "property_reviews"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_property_reviews_rating"),
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False
    )

    rating: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        comment="Rating from 1 to 5"
    )

    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
