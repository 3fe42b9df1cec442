"""User routes: registration, login, and the current user's profile and session."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import schemas
from .auth import get_current_user
from .database import get_db
from .models import User
from .user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "",
    response_model=schemas.WebResponse[schemas.UserResponse],
    response_model_exclude_none=True,
)
def register(
    request: schemas.RegisterUserRequest,
    db: Session = Depends(get_db),
):
    """
    Register a new user.

    Args:
        request (RegisterUserRequest): Username, password and name.
        db (Session): Database session.

    Returns:
        WebResponse[UserResponse]: Created user.
    """
    return {"data": UserService.register(db, request)}


@router.post(
    "/login",
    response_model=schemas.WebResponse[schemas.UserResponse],
    response_model_exclude_none=True,
)
def login(
    request: schemas.LoginUserRequest,
    db: Session = Depends(get_db),
):
    """
    Authenticate a user and return a new bearer token.

    Args:
        request (LoginUserRequest): Username and password.
        db (Session): Database session.

    Returns:
        WebResponse[UserResponse]: User data including ``token``.
    """
    return {"data": UserService.login(db, request)}


@router.get(
    "/current",
    response_model=schemas.WebResponse[schemas.UserResponse],
    response_model_exclude_none=True,
)
def get_current(current_user: User = Depends(get_current_user)):
    """Return the authenticated user."""
    return {"data": UserService.get(current_user)}


@router.patch(
    "/current",
    response_model=schemas.WebResponse[schemas.UserResponse],
    response_model_exclude_none=True,
)
def update_current(
    request: schemas.UpdateUserRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update name and/or password of the authenticated user."""
    return {"data": UserService.update(db, current_user, request)}


@router.delete("/current", response_model=schemas.WebResponse[str])
def logout(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Invalidate the authenticated user's token."""
    return {"data": UserService.logout(db, current_user)}
