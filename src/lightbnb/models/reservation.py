from datetime import date
from typing import Optional

from pydantic import BaseModel


class Reservation(BaseModel):
    id: int
    title: str
    cost_per_night: int
    start_date: date
    average_rating: Optional[float] = None
