"""
Property repository for listing search and listing inserts.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.property import SearchCriteria, PropertyCreate, PropertyListing
from lightbnb.utils.query_builder import (
    PLACEHOLDER,
    PropertySearchQueryBuilder,
    dollars_to_cents,
    number_placeholders
)
from typing import Optional, List, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)

# Insertable columns of the properties table, in statement order
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
    "active",
)


class PropertyRepository(BaseRepository):
    """
    Repository for property listings with filtered, rating-aware search.
    """

    async def search_properties(
        self,
        criteria: Union[SearchCriteria, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyListing]:
        """
        Search listings matching every supplied filter, cheapest first.

        Args:
            criteria: SearchCriteria, or a mapping of its fields; None applies no filter
            limit: Maximum number of listings to return (default from settings, 10)

        Returns:
            Listings with their average rating, ordered by nightly cost

        Raises:
            InvalidLimitError: If limit is not a positive integer
            Exception: If query execution fails
        """
        if criteria is None:
            criteria = SearchCriteria()
        elif not isinstance(criteria, SearchCriteria):
            criteria = SearchCriteria.model_validate(criteria)

        query = PropertySearchQueryBuilder(criteria, self.resolve_limit(limit)).build()
        rows = await self.fetch_all(query)

        listings = [PropertyListing.model_validate(row) for row in rows]
        logger.debug(f"Property search returned {len(listings)} listings")
        return listings

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> PropertyListing:
        """
        Insert a new listing.

        Args:
            property_data: PropertyCreate, or a mapping of its fields; cost in dollars

        Returns:
            The stored listing, with no average rating yet

        Raises:
            pydantic.ValidationError: If property data is invalid
            Exception: If database operation fails
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(property_data)

        values = property_data.model_dump()
        values["cost_per_night"] = dollars_to_cents(property_data.cost_per_night)

        markers = ", ".join(PLACEHOLDER for _ in PROPERTY_COLUMNS)
        query = number_placeholders([(
            f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)}) VALUES ({markers}) RETURNING *",
            [values[column] for column in PROPERTY_COLUMNS]
        )])

        row = await self.fetch_one(query)
        created = PropertyListing.model_validate({**row, "average_rating": None})
        logger.info(f"Created property: {created.title} (ID: {created.id})")
        return created
