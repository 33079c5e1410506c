"""
models/property.py
------------------
Domain models for rental listings and the filters used to search them.
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Mapping, Optional


@dataclass
class Property:
    """
    Represents a row of the properties table.

    Attributes:
        owner_id: The user who lists the property.
        title: Listing headline.
        country, street, city, province, post_code: Address parts.
        cost_per_night: Nightly price in cents.
        average_rating: Only set by queries that aggregate property_reviews.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    country: str
    street: str
    city: str
    province: str
    post_code: str
    description: Optional[str] = None
    thumbnail_photo_url: str = ""
    cover_photo_url: str = ""
    cost_per_night: int = 0
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in dollars."""
        return Decimal(self.cost_per_night) / 100

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - ${self.price_per_night:.2f}/night"


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _to_decimal(key: str, value: Any) -> Decimal:
    # str() first so a float like 99.99 keeps its shortest repr, not binary noise
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{key} must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"{key} must be a finite number, got {value!r}")
    return amount


def _to_float(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None


@dataclass
class PropertySearchFilters:
    """
    Optional filters for a property search. A field left as None is not applied.

    Attributes:
        city: Substring match on the city name (``LIKE %city%``).
        owner_id: Only properties listed by this user.
        min_price: Lowest nightly price in dollars (inclusive).
        max_price: Highest nightly price in dollars (inclusive).
        min_rating: Lowest average review rating (inclusive).
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_rating: Optional[float] = None

    # Option keys used by the web layer's search form.
    OPTION_KEYS: ClassVar[dict[str, str]] = {
        "city": "city",
        "owner_id": "owner_id",
        "minimum_price_per_night": "min_price",
        "maximum_price_per_night": "max_price",
        "minimum_rating": "min_rating",
    }

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "PropertySearchFilters":
        """
        Build filters from a search-form dict.

        Unknown keys, None and blank strings are ignored; numeric fields
        given as strings are converted.

        Raises:
            ValueError: If a numeric field cannot be converted.
        """
        values: dict[str, Any] = {}
        for key, value in (options or {}).items():
            field_name = cls.OPTION_KEYS.get(key)
            if field_name is None or value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            if field_name == "city":
                values[field_name] = str(value)
            elif field_name == "min_rating":
                values[field_name] = _to_float(key, value)
            elif field_name == "owner_id":
                values[field_name] = _to_int(key, value)
            else:
                values[field_name] = _to_decimal(key, value)
        return cls(**values)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
