from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass(kw_only=True, frozen=True)
class FilterCriteria:
    """Optional constraints for a listing search. A field left as None imposes no constraint."""

    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None
