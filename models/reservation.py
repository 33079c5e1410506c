"""
models/reservation.py
---------------------
Domain model for a guest's stay at a property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class Reservation:
    """
    A reservation joined with the property it is for.

    Attributes:
        id: Database primary key.
        guest_id: The user who booked the stay.
        property_id: The booked property.
        start_date: First night of the stay.
        end_date: Check-out date (always after start_date).
        property: The reserved property.
        average_rating: Average review rating of the property.
    """
    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    property: Property
    average_rating: Optional[float] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def is_completed(self, today: Optional[date] = None) -> bool:
        """True once the stay has ended (end_date strictly before today)."""
        return self.end_date < (today or date.today())

    def __str__(self) -> str:
        return f"{self.property.title}: {self.start_date} → {self.end_date}"
