from logging import Logger, getLogger
from math import isfinite
from re import sub
from typing import Any, Final, List, Optional, Tuple

from lightbnb.search.criteria import FilterCriteria, Number
from lightbnb.search.predicate import Comparator, Predicate, placeholder
from lightbnb.search.query_plan import QueryPlan

_logger: Final[Logger] = getLogger(__name__)

default_limit: Final[int] = 10
maximum_limit: Final[int] = 1000
_cents_per_unit: Final[int] = 100
_like_escape: Final[str] = "\\"

listing_columns: Final[Tuple[str, ...]] = (
    "id",
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
_qualified_listing_columns: Final[str] = ", ".join(
    [f"properties.{column}" for column in listing_columns]
)
_average_rating_sql: Final[str] = "avg(property_reviews.rating)"

_base_query: Final[str] = sub(
    r"\s+",
    " ",
    """
    SELECT {columns}
         , {average_rating} AS average_rating
      FROM properties
 LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
    """.format(
        columns=_qualified_listing_columns,
        average_rating=_average_rating_sql,
    ),
).strip()
# DuckDB requires every selected listing column to be grouped, listing identifier first
_group_by_clause: Final[str] = f"GROUP BY {_qualified_listing_columns}"
_order_by_clause: Final[str] = "ORDER BY cost_per_night"


def build_listing_query(
    criteria: FilterCriteria, limit: Optional[int] = None
) -> QueryPlan:
    clauses: List[str] = [_base_query]
    params: List[Any] = []

    where_parts: List[str] = []
    for predicate in _where_predicates(criteria):
        clause = predicate.to_clause(len(params) + 1)
        where_parts.append(clause.sql)
        params.extend(clause.params)
    if len(where_parts) > 0:
        clauses.append("WHERE {}".format(" AND ".join(where_parts)))

    clauses.append(_group_by_clause)

    if _is_present(criteria.minimum_rating):
        clause = Predicate(
            column=_average_rating_sql,
            comparator=Comparator.GE,
            value=criteria.minimum_rating,
        ).to_clause(len(params) + 1)
        clauses.append(f"HAVING {clause.sql}")
        params.extend(clause.params)

    clauses.append(_order_by_clause)
    params.append(normalise_limit(limit))
    clauses.append(f"LIMIT {placeholder(len(params))}")

    query = " ".join(clauses)
    _logger.debug(f"{query}: {params}")
    return QueryPlan(clauses=clauses, params=params, query=query)


def normalise_limit(limit: Optional[int]) -> int:
    """Missing or non-positive limits fall back to the default; larger ones are capped at the maximum."""
    if limit is None or limit <= 0:
        return default_limit
    return min(limit, maximum_limit)


def to_cents(amount: Number) -> int:
    return round(amount * _cents_per_unit)


def _where_predicates(criteria: FilterCriteria) -> List[Predicate]:
    # order is significant: it fixes the placeholder numbering
    predicates: List[Predicate] = []
    if criteria.city:
        predicates.append(
            Predicate(
                column="city",
                comparator=Comparator.LIKE,
                value=f"%{_escape_like(criteria.city)}%",
                escape=_like_escape,
            )
        )
    if criteria.owner_id is not None:
        predicates.append(
            Predicate(
                column="owner_id",
                comparator=Comparator.EQ,
                value=criteria.owner_id,
            )
        )
    if _is_present(criteria.minimum_price_per_night):
        predicates.append(
            Predicate(
                column="cost_per_night",
                comparator=Comparator.GE,
                value=to_cents(criteria.minimum_price_per_night),
            )
        )
    if _is_present(criteria.maximum_price_per_night):
        predicates.append(
            Predicate(
                column="cost_per_night",
                comparator=Comparator.LE,
                value=to_cents(criteria.maximum_price_per_night),
            )
        )
    return predicates


def _is_present(value: Optional[Number]) -> bool:
    # NaN and infinities impose no constraint
    return value is not None and isfinite(value)


def _escape_like(value: str) -> str:
    return "".join(
        [
            f"{_like_escape}{character}"
            if character in ("%", "_", _like_escape)
            else character
            for character in value
        ]
    )
