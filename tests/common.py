from pathlib import Path
from typing import Final

from duckdb import connect as duckdb_connect
from pytest import MonkeyPatch

_schema_path: Final[Path] = Path(__file__).parent / "schema.sql"


def monkeypatch_settings(monkeypatch: MonkeyPatch, **kwargs):
    default_settings = {
        "lightbnb_database_uri": ":memory:",
    }
    for key, value in {**default_settings, **kwargs}.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)
    from lightbnb.settings import get_settings

    get_settings.cache_clear()


def create_test_database(seed: bool = True):
    from lightbnb.db import Database

    connection = duckdb_connect(":memory:")
    for statement in _schema_path.read_text().split(";"):
        if statement.strip():
            connection.execute(statement)
    database = Database(connection)
    if seed:
        seed_test_data(database)
    return database


def seed_test_data(database) -> None:
    for name, email in [
        ("Alice Anders", "alice@example.com"),
        ("Bob Brown", "bob@example.com"),
    ]:
        database.execute(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3)",
            [name, email, "password"],
        )
    # ids 1-4 in insertion order
    for owner_id, title, city, cost_per_night in [
        (1, "Vancouver Loft", "Vancouver", 10000),
        (1, "Van Nuys Bungalow", "Van Nuys", 5000),
        (2, "Toronto Condo", "Toronto", 15000),
        (2, "Victoria Cottage", "Victoria", 20000),
    ]:
        database.execute(
            "INSERT INTO properties (owner_id, title, city, country, cost_per_night) VALUES ($1, $2, $3, $4, $5)",
            [owner_id, title, city, "Canada", cost_per_night],
        )
    # ids 1-3 in insertion order
    for guest_id, property_id, start_date, end_date in [
        (2, 1, "2024-01-10", "2024-01-15"),
        (2, 3, "2023-06-01", "2023-06-04"),
        (1, 4, "2024-03-01", "2024-03-02"),
    ]:
        database.execute(
            "INSERT INTO reservations (guest_id, property_id, start_date, end_date) VALUES ($1, $2, CAST($3 AS DATE), CAST($4 AS DATE))",
            [guest_id, property_id, start_date, end_date],
        )
    # property 4 has no reviews
    for guest_id, property_id, reservation_id, rating in [
        (2, 1, 1, 5),
        (2, 1, 1, 4),
        (1, 2, 1, 3),
        (2, 3, 2, 4),
    ]:
        database.execute(
            "INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating) VALUES ($1, $2, $3, $4)",
            [guest_id, property_id, reservation_id, rating],
        )
