from datetime import date

import pytest
from common import create_test_database, monkeypatch_settings

from lightbnb.errors import DuplicateUserError, QueryExecutionError
from lightbnb.models.property import NewProperty
from lightbnb.models.user import NewUser
from lightbnb.search.criteria import FilterCriteria

database = None


@pytest.fixture(autouse=True)
def setup(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch_settings(monkeypatch)

    global database
    database = create_test_database()


def _titles(listings) -> list:
    return [listing.title for listing in listings]


def test_get_user_with_email_ignores_case() -> None:
    from lightbnb.repositories.users import get_user_with_email

    user = get_user_with_email(database, "ALICE@Example.com")
    assert user is not None
    assert user.id == 1
    assert user.name == "Alice Anders"


def test_get_user_with_email_missing() -> None:
    from lightbnb.repositories.users import get_user_with_email

    assert get_user_with_email(database, "nobody@example.com") is None


def test_get_user_with_id() -> None:
    from lightbnb.repositories.users import get_user_with_id

    user = get_user_with_id(database, 2)
    assert user is not None
    assert user.email == "bob@example.com"
    assert "password" not in user.model_dump()
    assert get_user_with_id(database, 99) is None


def test_add_user() -> None:
    from lightbnb.repositories.users import add_user, get_user_with_id

    user = add_user(
        database,
        NewUser(name="Carol Cho", email="Carol@Example.com", password="secret"),
    )
    assert user.id == 3
    assert user.email == "carol@example.com"
    assert get_user_with_id(database, 3) == user


def test_add_user_duplicate_email() -> None:
    from lightbnb.repositories.users import add_user

    with pytest.raises(DuplicateUserError) as exc_info:
        add_user(
            database,
            NewUser(name="Alice Again", email="ALICE@example.com", password="x"),
        )
    assert exc_info.value.email == "alice@example.com"
    assert isinstance(exc_info.value.__cause__, QueryExecutionError)


def test_add_user_other_failures_propagate() -> None:
    from lightbnb.repositories.users import add_user

    database.execute("DROP TABLE users")
    with pytest.raises(QueryExecutionError):
        add_user(
            database,
            NewUser(name="Carol Cho", email="carol@example.com", password="x"),
        )


def test_get_all_reservations() -> None:
    from lightbnb.repositories.reservations import get_all_reservations

    reservations = get_all_reservations(database, 2)
    assert [reservation.id for reservation in reservations] == [2, 1]
    assert reservations[0].title == "Toronto Condo"
    assert reservations[0].start_date == date(2023, 6, 1)
    assert reservations[0].average_rating == 4.0
    assert reservations[1].cost_per_night == 10000
    assert reservations[1].average_rating == 4.5


def test_get_all_reservations_limit() -> None:
    from lightbnb.repositories.reservations import get_all_reservations

    assert len(get_all_reservations(database, 2, limit=1)) == 1
    assert len(get_all_reservations(database, 2, limit=0)) == 2


def test_get_all_reservations_unreviewed_property_excluded() -> None:
    from lightbnb.repositories.reservations import get_all_reservations

    assert get_all_reservations(database, 1) == []


def test_get_all_properties_unfiltered() -> None:
    from lightbnb.repositories.properties import get_all_properties

    listings = get_all_properties(database, FilterCriteria())
    assert _titles(listings) == [
        "Van Nuys Bungalow",
        "Vancouver Loft",
        "Toronto Condo",
        "Victoria Cottage",
    ]
    assert listings[0].average_rating == 3.0
    assert listings[3].average_rating is None


def test_get_all_properties_by_city() -> None:
    from lightbnb.repositories.properties import get_all_properties

    assert _titles(get_all_properties(database, FilterCriteria(city="Van"))) == [
        "Van Nuys Bungalow",
        "Vancouver Loft",
    ]


def test_get_all_properties_city_wildcards_match_literally() -> None:
    from lightbnb.repositories.properties import get_all_properties

    assert get_all_properties(database, FilterCriteria(city="%")) == []
    assert get_all_properties(database, FilterCriteria(city="V_n")) == []


def test_get_all_properties_by_owner() -> None:
    from lightbnb.repositories.properties import get_all_properties

    assert _titles(get_all_properties(database, FilterCriteria(owner_id=2), 1)) == [
        "Toronto Condo"
    ]


def test_get_all_properties_by_price() -> None:
    from lightbnb.repositories.properties import get_all_properties

    assert _titles(
        get_all_properties(
            database,
            FilterCriteria(minimum_price_per_night=60, maximum_price_per_night=160),
        )
    ) == ["Vancouver Loft", "Toronto Condo"]


def test_get_all_properties_by_rating() -> None:
    from lightbnb.repositories.properties import get_all_properties

    listings = get_all_properties(database, FilterCriteria(minimum_rating=4))
    assert _titles(listings) == ["Vancouver Loft", "Toronto Condo"]
    assert [listing.average_rating for listing in listings] == [4.5, 4.0]


def test_get_all_properties_all_filters() -> None:
    from lightbnb.repositories.properties import get_all_properties

    assert _titles(
        get_all_properties(
            database,
            FilterCriteria(
                city="Van",
                owner_id=1,
                minimum_price_per_night=20,
                maximum_price_per_night=200,
                minimum_rating=4,
            ),
            limit=5,
        )
    ) == ["Vancouver Loft"]


def test_add_property() -> None:
    from lightbnb.repositories.properties import add_property, get_all_properties

    created = add_property(
        database,
        NewProperty(
            owner_id=2,
            title="Halifax Harbour House",
            city="Halifax",
            cost_per_night=125.5,
            number_of_bedrooms=3,
        ),
    )
    assert created.id == 5
    assert created.cost_per_night == 12550
    assert created.number_of_bedrooms == 3
    assert created.active is True
    assert _titles(get_all_properties(database, FilterCriteria(city="Halifax"))) == [
        "Halifax Harbour House"
    ]
