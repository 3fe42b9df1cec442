"""Contact management routes for the Contacts API."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import schemas
from .auth import get_current_user
from .contact_service import ContactService
from .database import get_db
from .models import User

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=schemas.WebResponse[schemas.ContactResponse])
def create_contact(
    request: schemas.CreateContactRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new contact owned by the current user.

    Args:
        request (CreateContactRequest): Contact input data.
        db (Session): Database session.
        current_user (User): Authenticated user.

    Returns:
        WebResponse[ContactResponse]: Created contact.
    """
    return {"data": ContactService.create(db, current_user, request)}


@router.get("", response_model=schemas.PageResponse[schemas.ContactResponse])
def search_contacts(
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    page: int | None = None,
    size: int | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Search contacts belonging to the current user.

    Args:
        name (str | None): Substring of first or last name.
        email (str | None): Substring of email.
        phone (str | None): Substring of phone.
        page (int | None): Page number, starting at 1.
        size (int | None): Page size.
        db (Session): Database session.
        current_user (User): Authenticated user.

    Returns:
        PageResponse[ContactResponse]: Matching contacts and paging metadata.
    """
    params = {"name": name, "email": email, "phone": phone, "page": page, "size": size}
    request = {key: value for key, value in params.items() if value is not None}
    return ContactService.search(db, current_user, request)


@router.get(
    "/{contact_id:int}", response_model=schemas.WebResponse[schemas.ContactResponse]
)
def get_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Retrieve a single contact by ID for the current user.

    Raises:
        NotFoundError: If contact is not found.
    """
    return {"data": ContactService.get(db, current_user, contact_id)}


@router.put(
    "/{contact_id:int}", response_model=schemas.WebResponse[schemas.ContactResponse]
)
def update_contact(
    contact_id: int,
    request: schemas.UpdateContactRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update an existing contact.

    Only fields provided in the request will be updated.

    Raises:
        NotFoundError: If contact is not found.
    """
    return {"data": ContactService.update(db, current_user, contact_id, request)}


@router.delete(
    "/{contact_id:int}", response_model=schemas.WebResponse[schemas.ContactResponse]
)
def remove_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a contact owned by the current user and return it."""
    return {"data": ContactService.remove(db, current_user, contact_id)}
