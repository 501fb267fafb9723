from typing import Final, List, Optional

from lightbnb.db import Database
from lightbnb.models.reservation import Reservation
from lightbnb.search.query_builder import normalise_limit

_reservations_query: Final[str] = """
    SELECT reservations.id
         , properties.title
         , properties.cost_per_night
         , reservations.start_date
         , avg(property_reviews.rating) AS average_rating
      FROM reservations
      JOIN properties ON reservations.property_id = properties.id
      JOIN property_reviews ON properties.id = property_reviews.property_id
     WHERE reservations.guest_id = $1
  GROUP BY reservations.id
         , properties.id
         , properties.title
         , properties.cost_per_night
         , reservations.start_date
  ORDER BY reservations.start_date
     LIMIT $2
"""


def get_all_reservations(
    database: Database, guest_id: int, limit: Optional[int] = None
) -> List[Reservation]:
    return [
        Reservation(**row)
        for row in database.fetchall(
            _reservations_query, [guest_id, normalise_limit(limit)]
        )
    ]
