"""
Parameterized query building for the property listing search.
Filters are collected as (template, value) pairs and placeholders are numbered
in one final pass, so the Nth $N always refers to the Nth parameter.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, List, Tuple, Union
from lightbnb.schemas.property import SearchCriteria
from lightbnb.utils.exceptions import InvalidLimitError

# Unnumbered marker used inside clause templates
PLACEHOLDER = "?"

# A clause template and the values for its markers, in order
Clause = Tuple[str, List[Any]]


@dataclass(frozen=True)
class ParameterizedQuery:
    """Query text with $1..$N placeholders and the values they bind to."""
    query_text: str
    parameters: Tuple[Any, ...]


def dollars_to_cents(amount: Union[Decimal, int, float, str]) -> int:
    """
    Convert a dollar amount to integer cents, rounding half up.

    Args:
        amount: Dollar amount

    Returns:
        Amount in cents
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def validate_limit(limit: int) -> int:
    """Reject result limits that are not positive integers."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimitError(limit)
    return limit


def number_placeholders(clauses: List[Clause]) -> ParameterizedQuery:
    """
    Number the markers of every clause as $1..$N in textual order.

    Args:
        clauses: Clause templates with their values

    Returns:
        ParameterizedQuery joining the clauses line by line
    """
    parameters: List[Any] = []
    lines = []

    for template, values in clauses:
        pieces = template.split(PLACEHOLDER)
        if len(pieces) - 1 != len(values):
            raise ValueError(f"Clause has {len(pieces) - 1} placeholders but {len(values)} values: {template}")

        line = pieces[0]
        for value, piece in zip(values, pieces[1:]):
            parameters.append(value)
            line += f"${len(parameters)}{piece}"
        lines.append(line)

    return ParameterizedQuery(query_text="\n".join(lines), parameters=tuple(parameters))


class PropertySearchQueryBuilder:
    """
    Builds the filtered, rating-aggregated, cost-ordered listing query.

    Plain column filters go to WHERE. The rating filter targets the
    aggregate and only exists after grouping, so it goes to HAVING.
    """

    SELECT_CLAUSE = (
        "SELECT properties.*, AVG(property_reviews.rating) AS average_rating\n"
        "FROM properties\n"
        "LEFT OUTER JOIN property_reviews ON properties.id = property_reviews.property_id"
    )
    GROUP_BY_CLAUSE = "GROUP BY properties.id"
    ORDER_BY_CLAUSE = "ORDER BY properties.cost_per_night ASC"

    def __init__(self, criteria: SearchCriteria, limit: int = 10):
        self.criteria = criteria
        self.limit = validate_limit(limit)

    def where_conditions(self) -> List[Tuple[str, Any]]:
        """Predicates on stored columns, applied before grouping."""
        criteria = self.criteria
        conditions = []

        if criteria.city:
            conditions.append(("LOWER(properties.city) LIKE LOWER(?)", f"%{criteria.city}%"))

        if criteria.owner_id is not None:
            conditions.append(("properties.owner_id = ?", criteria.owner_id))

        # Stored in cents, supplied in dollars
        if criteria.minimum_price_per_night is not None:
            conditions.append((
                "properties.cost_per_night >= ?",
                dollars_to_cents(criteria.minimum_price_per_night)
            ))
        if criteria.maximum_price_per_night is not None:
            conditions.append((
                "properties.cost_per_night <= ?",
                dollars_to_cents(criteria.maximum_price_per_night)
            ))

        return conditions

    def having_conditions(self) -> List[Tuple[str, Any]]:
        """Predicates on the aggregate rating, applied after grouping."""
        conditions = []

        if self.criteria.minimum_rating is not None:
            conditions.append(("AVG(property_reviews.rating) >= ?", self.criteria.minimum_rating))

        return conditions

    def build(self) -> ParameterizedQuery:
        """Assemble the clauses and number their placeholders."""
        clauses: List[Clause] = [(self.SELECT_CLAUSE, [])]

        where = self.where_conditions()
        if where:
            clauses.append(self._combine("WHERE", where))

        clauses.append((self.GROUP_BY_CLAUSE, []))

        having = self.having_conditions()
        if having:
            clauses.append(self._combine("HAVING", having))

        clauses.append((self.ORDER_BY_CLAUSE, []))
        clauses.append((f"LIMIT {PLACEHOLDER}", [self.limit]))

        return number_placeholders(clauses)

    @staticmethod
    def _combine(keyword: str, conditions: List[Tuple[str, Any]]) -> Clause:
        template = f"{keyword} " + " AND ".join(predicate for predicate, _ in conditions)
        return template, [value for _, value in conditions]
