from typing import Annotated, Final, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status

from lightbnb.db import Database, get_database
from lightbnb.errors import DuplicateUserError
from lightbnb.models.reservation import Reservation
from lightbnb.models.user import NewUser, User
from lightbnb.repositories.reservations import get_all_reservations
from lightbnb.repositories.users import add_user, get_user_with_email, get_user_with_id
from lightbnb.search.query_builder import maximum_limit

_users_tag: Final[str] = "Users"
_duplicate_email_detail: Final[str] = "A user with this email already exists."


def add_routes(app: FastAPI) -> None:
    @app.post(
        "/users",
        response_model=User,
        status_code=status.HTTP_201_CREATED,
        tags=[_users_tag],
        summary="Register a user",
    )
    def create_user(
        new_user: NewUser,
        database: Annotated[Database, Depends(get_database)],
    ) -> User:
        if get_user_with_email(database, new_user.email) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=_duplicate_email_detail
            )
        try:
            return add_user(database, new_user)
        except DuplicateUserError as e:
            # registered concurrently between the lookup and the insert
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=_duplicate_email_detail
            ) from e

    @app.get(
        "/users/{user_id}",
        response_model=User,
        tags=[_users_tag],
        summary="User",
    )
    def get_user(
        user_id: int,
        database: Annotated[Database, Depends(get_database)],
    ) -> User:
        user = get_user_with_id(database, user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"User {user_id} does not exist.",
            )
        return user

    @app.get(
        "/users/{user_id}/reservations",
        response_model=List[Reservation],
        tags=[_users_tag],
        summary="User Reservations",
    )
    def get_user_reservations(
        user_id: int,
        database: Annotated[Database, Depends(get_database)],
        limit: Annotated[Optional[int], Query(le=maximum_limit)] = None,
    ) -> List[Reservation]:
        return get_all_reservations(database, user_id, limit)
