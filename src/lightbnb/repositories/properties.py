from logging import Logger, getLogger
from typing import Final, List, Optional

from lightbnb.db import Database
from lightbnb.models.property import NewProperty, Property, PropertyListing
from lightbnb.search.criteria import FilterCriteria
from lightbnb.search.predicate import placeholder
from lightbnb.search.query_builder import (
    build_listing_query,
    listing_columns,
    to_cents,
)

_logger: Final[Logger] = getLogger(__name__)

_insert_columns: Final[List[str]] = [
    column for column in listing_columns if column not in ("id", "active")
]


def get_all_properties(
    database: Database, criteria: FilterCriteria, limit: Optional[int] = None
) -> List[PropertyListing]:
    plan = build_listing_query(criteria, limit)
    return [PropertyListing(**row) for row in database.fetchall(plan.query, plan.params)]


def add_property(database: Database, new_property: NewProperty) -> Property:
    values = {
        **new_property.model_dump(),
        "cost_per_night": to_cents(new_property.cost_per_night),
    }
    row = database.fetchone(
        "INSERT INTO properties ({columns}) VALUES ({placeholders}) RETURNING {returning}".format(
            columns=", ".join(_insert_columns),
            placeholders=", ".join(
                [placeholder(position) for position in range(1, len(_insert_columns) + 1)]
            ),
            returning=", ".join(listing_columns),
        ),
        [values[column] for column in _insert_columns],
    )
    created = Property(**row)
    _logger.info(f"added property {created.id} for owner {created.owner_id}")
    return created
