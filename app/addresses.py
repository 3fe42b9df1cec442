"""Address routes, nested under the owning contact."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import schemas
from .address_service import AddressService
from .auth import get_current_user
from .database import get_db
from .models import User

router = APIRouter(prefix="/api/contacts/{contact_id:int}/addresses", tags=["addresses"])


@router.post("", response_model=schemas.WebResponse[schemas.AddressResponse])
def create_address(
    contact_id: int,
    request: schemas.CreateAddressRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add an address to one of the current user's contacts.

    Args:
        contact_id (int): Parent contact identifier.
        request (CreateAddressRequest): Address fields.
        db (Session): Database session.
        current_user (User): Authenticated user.

    Returns:
        WebResponse[AddressResponse]: Created address.
    """
    return {"data": AddressService.create(db, current_user, contact_id, request)}


@router.get("", response_model=schemas.WebResponse[List[schemas.AddressResponse]])
def list_addresses(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List every address of a contact."""
    return {"data": AddressService.list(db, current_user, contact_id)}


@router.get(
    "/{address_id:int}", response_model=schemas.WebResponse[schemas.AddressResponse]
)
def get_address(
    contact_id: int,
    address_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return {"data": AddressService.get(db, current_user, contact_id, address_id)}


@router.put(
    "/{address_id:int}", response_model=schemas.WebResponse[schemas.AddressResponse]
)
def update_address(
    contact_id: int,
    address_id: int,
    request: schemas.UpdateAddressRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return {
        "data": AddressService.update(db, current_user, contact_id, address_id, request)
    }


@router.delete(
    "/{address_id:int}", response_model=schemas.WebResponse[schemas.AddressResponse]
)
def remove_address(
    contact_id: int,
    address_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete an address and return it."""
    return {"data": AddressService.remove(db, current_user, contact_id, address_id)}
