from typing import Annotated, Final, List, Optional

from fastapi import Depends, FastAPI, Query, status

from lightbnb.db import Database, get_database
from lightbnb.models.property import NewProperty, Property, PropertyListing
from lightbnb.repositories.properties import add_property, get_all_properties
from lightbnb.search.criteria import FilterCriteria
from lightbnb.search.query_builder import maximum_limit

_properties_tag: Final[str] = "Properties"

FiniteNumber = Annotated[Optional[float], Query(allow_inf_nan=False)]


def add_routes(app: FastAPI) -> None:
    @app.get(
        "/properties",
        response_model=List[PropertyListing],
        tags=[_properties_tag],
        summary="Search properties",
    )
    def search_properties(
        database: Annotated[Database, Depends(get_database)],
        city: Optional[str] = None,
        owner_id: Optional[int] = None,
        minimum_price_per_night: FiniteNumber = None,
        maximum_price_per_night: FiniteNumber = None,
        minimum_rating: FiniteNumber = None,
        limit: Annotated[Optional[int], Query(le=maximum_limit)] = None,
    ) -> List[PropertyListing]:
        return get_all_properties(
            database,
            FilterCriteria(
                city=city,
                owner_id=owner_id,
                minimum_price_per_night=minimum_price_per_night,
                maximum_price_per_night=maximum_price_per_night,
                minimum_rating=minimum_rating,
            ),
            limit,
        )

    @app.post(
        "/properties",
        response_model=Property,
        status_code=status.HTTP_201_CREATED,
        tags=[_properties_tag],
        summary="Add a property",
    )
    def create_property(
        new_property: NewProperty,
        database: Annotated[Database, Depends(get_database)],
    ) -> Property:
        return add_property(database, new_property)
