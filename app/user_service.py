"""Business logic for users: registration, login, profile and logout."""

import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import crud, schemas
from .auth import generate_token, get_password_hash, verify_password
from .errors import ConflictError, UnauthorizedError
from .models import User
from .validation import validate

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "username already exists"
BAD_CREDENTIALS = "username or password is wrong"

# verified against when the username is unknown
DUMMY_PASSWORD_HASH = get_password_hash("dummy-password")


class UserService:
    """Operations on the ``users`` table.

    Every method takes the request's database session explicitly; the
    service itself holds no state.
    """

    @classmethod
    def register(
        cls, db: Session, request: Mapping[str, Any] | schemas.RegisterUserRequest
    ) -> schemas.UserResponse:
        """
        Register a new user.

        Args:
            db (Session): Database session.
            request: Raw or parsed registration payload.

        Raises:
            ValidationError: If the payload is malformed.
            ConflictError: If the username is already taken.

        Returns:
            UserResponse: The new user, without password or token.
        """
        register_request = validate(schemas.RegisterUserRequest, request)

        if crud.count_users_by_username(db, register_request.username) != 0:
            raise ConflictError(USERNAME_TAKEN)

        hashed_password = get_password_hash(register_request.password)
        try:
            user = crud.create_user(
                db,
                username=register_request.username,
                hashed_password=hashed_password,
                name=register_request.name,
            )
        except IntegrityError as exc:
            # lost the race against a concurrent registration
            raise ConflictError(USERNAME_TAKEN) from exc

        logger.info("Registered user %s", user.username)
        return schemas.UserResponse(username=user.username, name=user.name)

    @classmethod
    def login(
        cls, db: Session, request: Mapping[str, Any] | schemas.LoginUserRequest
    ) -> schemas.UserResponse:
        """
        Check credentials and issue a fresh session token.

        The same error is raised for an unknown username and for a wrong
        password.
        """
        login_request = validate(schemas.LoginUserRequest, request)

        user = crud.get_user_by_username(db, login_request.username)
        stored_hash = user.password if user is not None else DUMMY_PASSWORD_HASH
        password_ok = verify_password(login_request.password, stored_hash)
        if user is None or not password_ok:
            logger.warning("Failed login for %s", login_request.username)
            raise UnauthorizedError(BAD_CREDENTIALS)

        user = crud.save_user(db, user, {"token": generate_token()})
        logger.info("User %s logged in", user.username)
        return schemas.UserResponse(
            username=user.username, name=user.name, token=user.token
        )

    @classmethod
    def get(cls, user: User) -> schemas.UserResponse:
        return schemas.UserResponse(username=user.username, name=user.name)

    @classmethod
    def update(
        cls,
        db: Session,
        user: User,
        request: Mapping[str, Any] | schemas.UpdateUserRequest,
    ) -> schemas.UserResponse:
        """Change the name and/or password of ``user``."""
        update_request = validate(schemas.UpdateUserRequest, request)

        changes = {}
        if update_request.name:
            changes["name"] = update_request.name
        if update_request.password:
            changes["password"] = get_password_hash(update_request.password)

        user = crud.save_user(db, user, changes)
        logger.info("Updated user %s (%s)", user.username, ", ".join(changes) or "no changes")
        return schemas.UserResponse(username=user.username, name=user.name)

    @classmethod
    def logout(cls, db: Session, user: User) -> str:
        """Drop the user's token so it no longer authenticates."""
        crud.save_user(db, user, {"token": None})
        logger.info("User %s logged out", user.username)
        return "OK"
