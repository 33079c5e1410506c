"""
services/lightbnb_service.py
-----------------------------
The data-access surface used by the LightBnB web layer.

Wraps the user, reservation and property repositories behind one object
built from an explicit ``Database`` handle, and accepts the loose dicts the
web layer posts alongside the typed models.
"""

from dataclasses import fields
from typing import Any, Mapping, Optional, Union

import config
from db.connection import Database
from models.property import Property, PropertySearchFilters
from models.reservation import Reservation
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _build(model: type, data: Mapping[str, Any]) -> Any:
    """Instantiate a dataclass from a dict, ignoring unknown keys and any id."""
    known = {f.name for f in fields(model)} - {"id"}
    try:
        return model(**{k: v for k, v in data.items() if k in known})
    except TypeError as e:
        raise ValueError(f"Invalid {model.__name__.lower()} data: {e}") from None


class LightBnBService:
    """Users, reservations and properties for the booking site."""

    def __init__(self, db: Database):
        self.users = UserRepository(db)
        self.reservations = ReservationRepository(db)
        self.properties = PropertyRepository(db)

    # ── Users ─────────────────────────────────────────────

    def get_user_with_email(self, email: str) -> Optional[User]:
        """Get a single user by email, or None."""
        return self.users.get_by_email(email)

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """Get a single user by id, or None."""
        return self.users.get_by_id(user_id)

    def add_user(self, user: Union[User, Mapping[str, Any]]) -> User:
        """
        Register a new user.

        Args:
            user: A User, or a dict with name, email and password.

        Raises:
            ValueError: If a required field is missing.
            DuplicateRecordError: If the email is already registered.
        """
        if not isinstance(user, User):
            user = _build(User, user)
        return self.users.add(user)

    # ── Reservations ──────────────────────────────────────

    def get_all_reservations(
        self, guest_id: int, limit: int = config.DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        """Get a guest's completed reservations, oldest stay first."""
        return self.reservations.get_past_for_guest(guest_id, limit)

    # ── Properties ────────────────────────────────────────

    def get_all_properties(
        self,
        options: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
        limit: int = config.DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Search properties, cheapest first.

        Args:
            options: PropertySearchFilters, or a search-form dict with any of
                city, owner_id, minimum_price_per_night,
                maximum_price_per_night and minimum_rating.
            limit: Maximum number of results.

        Raises:
            ValueError: If a numeric option is not a number.
        """
        if not isinstance(options, PropertySearchFilters):
            options = PropertySearchFilters.from_options(options)
        return self.properties.search(options, limit)

    def add_property(self, prop: Union[Property, Mapping[str, Any]]) -> Property:
        """
        Add a property listing to the database.

        Args:
            prop: A Property, or a dict of property columns.

        Returns:
            The stored Property with its generated id.
        """
        if not isinstance(prop, Property):
            prop = _build(Property, prop)
        return self.properties.add(prop)
