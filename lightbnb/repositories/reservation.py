"""
Reservation repository for a guest's bookings.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.reservation import ReservationSummary
from lightbnb.utils.query_builder import ParameterizedQuery, validate_limit
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository):
    """
    Repository for reservations joined with their properties.
    """

    RESERVATIONS_QUERY = """
SELECT reservations.id, properties.id AS property_id, properties.title, properties.cost_per_night,
       reservations.start_date, reservations.end_date, properties.thumbnail_photo_url,
       AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT OUTER JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2
"""

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[ReservationSummary]:
        """
        Get all reservations for a single guest, earliest first.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return (default from settings, 10)

        Returns:
            Reservations with their property's title, cost and average rating

        Raises:
            InvalidLimitError: If limit is not a positive integer
        """
        limit = validate_limit(self.resolve_limit(limit))

        rows = await self.fetch_all(ParameterizedQuery(self.RESERVATIONS_QUERY.strip(), (guest_id, limit)))

        reservations = [ReservationSummary.model_validate(row) for row in rows]
        logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
        return reservations
