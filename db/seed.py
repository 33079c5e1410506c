"""
db/seed.py
----------
Loads the static users/properties JSON fixtures into the database.

Fixtures may be a JSON list of records or a JSON object keyed by id
(``{"1": {...}, "2": {...}}``). Users are inserted first; property
``owner_id`` values refer to fixture user ids and are remapped to the ids
the database assigned.
"""

import json
from pathlib import Path
from typing import Any, Optional

from db.connection import Database
from db.errors import FixtureError
from models.property import Property
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def load_fixture(path: str | Path) -> list[dict[str, Any]]:
    """
    Read a fixture file into a list of records.

    Records from an id-keyed object get an ``id`` taken from their key when
    they do not carry one.

    Raises:
        FixtureError: If the file is missing, not JSON, or not a collection of objects.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FixtureError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise FixtureError(str(path), f"not valid JSON ({e.msg})") from e

    if isinstance(data, dict):
        records = []
        for key, value in data.items():
            if isinstance(value, dict):
                value = {"id": int(key) if str(key).isdigit() else key, **value}
            records.append(value)
    elif isinstance(data, list):
        records = data
    else:
        raise FixtureError(str(path), "expected a list or an object of records")

    if not all(isinstance(r, dict) for r in records):
        raise FixtureError(str(path), "every record must be an object")
    return records


def seed(
    db: Database,
    users_path: Optional[str | Path] = None,
    properties_path: Optional[str | Path] = None,
) -> dict[str, int]:
    """
    Insert fixture users and properties in a single transaction.

    Both files are read before anything is written. If any record fails
    (bad fixture data, a duplicate email, a foreign key violation) nothing
    is committed, so the seed can simply be re-run once the data is fixed.

    Returns:
        Number of rows inserted per table: {'users': n, 'properties': m}.
    """
    user_records = load_fixture(users_path) if users_path else []
    property_records = load_fixture(properties_path) if properties_path else []
    owner_ids: dict[Any, int] = {}
    counts = {"users": 0, "properties": 0}

    try:
        with db.transaction() as tx:
            user_repo = UserRepository(tx)
            property_repo = PropertyRepository(tx)

            for record in user_records:
                try:
                    user = User(
                        name=record["name"],
                        email=record["email"],
                        password=record["password"],
                    )
                except KeyError as e:
                    raise FixtureError(str(users_path), f"user record missing {e}") from e
                created = user_repo.add(user)
                if "id" in record:
                    owner_ids[record["id"]] = created.id
                counts["users"] += 1

            for record in property_records:
                values = {k: v for k, v in record.items() if k not in ("id", "average_rating")}
                values["owner_id"] = owner_ids.get(values.get("owner_id"), values.get("owner_id"))
                try:
                    prop = Property(**values)
                except TypeError as e:
                    raise FixtureError(str(properties_path), str(e)) from e
                property_repo.add(prop)
                counts["properties"] += 1
    except Exception:
        logger.error("Seeding failed; all fixture rows rolled back.")
        raise

    logger.info(f"Seeded {counts['users']} users and {counts['properties']} properties.")
    return counts
