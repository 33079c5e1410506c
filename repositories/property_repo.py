"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here, including the
search query assembled from optional filters.
"""

from typing import Any

import config
from db.connection import Executor
from models.property import Property, PropertySearchFilters
from utils.logger import get_logger

logger = get_logger(__name__)

_SEARCH_BASE_SQL = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON properties.id = property_reviews.property_id
"""

_INSERT_COLUMNS = (
    "owner_id", "title", "description", "thumbnail_photo_url", "cover_photo_url",
    "cost_per_night", "parking_spaces", "number_of_bathrooms", "number_of_bedrooms",
    "country", "street", "city", "province", "post_code", "active",
)


def _escape_like(value: str) -> str:
    """Make LIKE metacharacters in user input match literally (backslash is the default escape)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_property_search(
    filters: PropertySearchFilters, limit: int
) -> tuple[str, list[Any]]:
    """
    Assemble the property search statement.

    Row filters go into a WHERE clause: the first applied filter opens it and
    every later one is joined with AND, whichever filters are present. The
    rating filter is on an aggregate and goes into HAVING. Prices are given
    in dollars and compared against cost_per_night, which is stored in cents.

    Args:
        filters: The filters to apply; None fields are skipped.
        limit: Maximum number of rows.

    Returns:
        ``(sql, params)`` with params in placeholder order, limit last.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    params: list[Any] = []
    predicates: list[str] = []

    if filters.city is not None:
        # The % wildcards belong in the parameter, not the statement
        params.append(f"%{_escape_like(filters.city)}%")
        predicates.append("properties.city LIKE %s")

    if filters.owner_id is not None:
        params.append(filters.owner_id)
        predicates.append("properties.owner_id = %s")

    if filters.min_price is not None:
        params.append(filters.min_price)
        predicates.append("properties.cost_per_night >= %s * 100")

    if filters.max_price is not None:
        params.append(filters.max_price)
        predicates.append("properties.cost_per_night <= %s * 100")

    sql = _SEARCH_BASE_SQL
    for i, predicate in enumerate(predicates):
        sql += f"    {'WHERE' if i == 0 else 'AND'} {predicate}\n"

    sql += "    GROUP BY properties.id\n"

    if filters.min_rating is not None:
        params.append(filters.min_rating)
        sql += "    HAVING avg(property_reviews.rating) >= %s\n"

    params.append(limit)
    sql += "    ORDER BY properties.cost_per_night\n    LIMIT %s;"
    return sql, params


class PropertyRepository:
    """Repository for property listings."""

    def __init__(self, db: Executor):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property listing.

        Args:
            prop: The Property to persist; its id is ignored.

        Returns:
            The stored Property with its generated id.
        """
        placeholders = ", ".join(["%s"] * len(_INSERT_COLUMNS))
        sql = (
            f"INSERT INTO properties ({', '.join(_INSERT_COLUMNS)}) "
            f"VALUES ({placeholders}) RETURNING *;"
        )
        row = self.db.fetch_one(sql, [getattr(prop, col) for col in _INSERT_COLUMNS])
        created = self.row_to_property(row)
        logger.info(f"Added property #{created.id} for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        filters: PropertySearchFilters | None = None,
        limit: int = config.DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Find properties matching the filters, cheapest first.

        Args:
            filters: Optional search filters (none means every reviewed property).
            limit: Maximum number of rows to return.

        Returns:
            List of Property objects with average_rating populated.
        """
        sql, params = build_property_search(filters or PropertySearchFilters(), limit)
        logger.debug(f"Property search: {sql} {params}")
        return [self.row_to_property(r) for r in self.db.execute(sql, params)]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def row_to_property(row: dict) -> Property:
        """Convert a database row to a Property domain object."""
        rating = row.get("average_rating")
        return Property(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row.get("description"),
            thumbnail_photo_url=row.get("thumbnail_photo_url") or "",
            cover_photo_url=row.get("cover_photo_url") or "",
            cost_per_night=int(row.get("cost_per_night") or 0),
            parking_spaces=row.get("parking_spaces") or 0,
            number_of_bathrooms=row.get("number_of_bathrooms") or 0,
            number_of_bedrooms=row.get("number_of_bedrooms") or 0,
            country=row["country"],
            street=row["street"],
            city=row["city"],
            province=row["province"],
            post_code=row["post_code"],
            active=row.get("active", True),
            average_rating=float(rating) if rating is not None else None,
        )
