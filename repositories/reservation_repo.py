"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
Reservations are read-only here; they are joined with their property and
the property's reviews to report an average rating per stay.
"""

import config
from db.connection import Executor
from models.reservation import Reservation
from repositories.property_repo import PropertyRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for read operations on the reservations table."""

    def __init__(self, db: Executor):
        self.db = db

    def get_past_for_guest(
        self, guest_id: int, limit: int = config.DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        """
        Fetch a guest's completed stays (end_date before today).

        Args:
            guest_id: The user who made the reservations.
            limit: Maximum number of rows to return.

        Returns:
            List of Reservation objects ordered by start_date ascending.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        sql = """
            SELECT properties.*,
                   reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
              AND reservations.end_date < now()::date
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        rows = self.db.execute(sql, (guest_id, limit))
        logger.debug(f"Fetched {len(rows)} past reservations for guest {guest_id}")
        return [self._row_to_reservation(r) for r in rows]

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Convert a joined reservation/property row to a Reservation."""
        prop = PropertyRepository.row_to_property(row)
        return Reservation(
            id=row["reservation_id"],
            guest_id=row["guest_id"],
            property_id=prop.id,
            start_date=row["start_date"],
            end_date=row["end_date"],
            property=prop,
            average_rating=prop.average_rating,
        )
