"""Authentication helpers and the bearer-token gate used by protected routes."""

import logging
import uuid

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from . import crud
from .core import get_settings
from .database import get_db
from .errors import UnauthorizedError
from .models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
)
bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plain password with its hashed value."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a salted password hash using the configured context."""
    return pwd_context.hash(password)


def generate_token() -> str:
    """Create a new random opaque session token."""
    return str(uuid.uuid4())


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Dependency that returns the user owning the presented bearer token."""

    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Unauthorized")
    user = crud.get_user_by_token(db, credentials.credentials)
    if user is None:
        logger.warning("Rejected unknown bearer token")
        raise UnauthorizedError("Unauthorized")
    return user
