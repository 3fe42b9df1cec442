"""Business logic for contact addresses.

Each call first checks that the parent contact belongs to the caller,
then looks the address up under that contact only.
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from . import crud, schemas
from .contact_service import ContactService
from .errors import NotFoundError
from .models import MAX_ROW_ID, Address, User
from .validation import validate

logger = logging.getLogger(__name__)


class AddressService:
    @classmethod
    def check_address_must_exist(
        cls, db: Session, contact_id: int, address_id: int
    ) -> Address:
        if not 0 <= address_id <= MAX_ROW_ID:
            raise NotFoundError("address not found")
        address = crud.get_address(db, contact_id, address_id)
        if address is None:
            raise NotFoundError("address not found")
        return address

    @classmethod
    def create(
        cls,
        db: Session,
        user: User,
        contact_id: int,
        request: Mapping[str, Any] | schemas.CreateAddressRequest,
    ) -> schemas.AddressResponse:
        create_request = validate(schemas.CreateAddressRequest, request)
        ContactService.check_contact_must_exist(db, user.username, contact_id)

        address = crud.create_address(db, contact_id, create_request.model_dump())
        logger.info("Created address %s on contact %s", address.id, contact_id)
        return schemas.AddressResponse.model_validate(address)

    @classmethod
    def get(
        cls, db: Session, user: User, contact_id: int, address_id: int
    ) -> schemas.AddressResponse:
        ContactService.check_contact_must_exist(db, user.username, contact_id)
        address = cls.check_address_must_exist(db, contact_id, address_id)
        return schemas.AddressResponse.model_validate(address)

    @classmethod
    def update(
        cls,
        db: Session,
        user: User,
        contact_id: int,
        address_id: int,
        request: Mapping[str, Any] | schemas.UpdateAddressRequest,
    ) -> schemas.AddressResponse:
        update_request = validate(schemas.UpdateAddressRequest, request)
        ContactService.check_contact_must_exist(db, user.username, contact_id)
        address = cls.check_address_must_exist(db, contact_id, address_id)

        address = crud.update_address(
            db, address, update_request.model_dump(exclude_unset=True)
        )
        logger.info("Updated address %s on contact %s", address.id, contact_id)
        return schemas.AddressResponse.model_validate(address)

    @classmethod
    def remove(
        cls, db: Session, user: User, contact_id: int, address_id: int
    ) -> schemas.AddressResponse:
        ContactService.check_contact_must_exist(db, user.username, contact_id)
        address = cls.check_address_must_exist(db, contact_id, address_id)

        response = schemas.AddressResponse.model_validate(address)
        crud.delete_address(db, address)
        logger.info("Deleted address %s on contact %s", address_id, contact_id)
        return response

    @classmethod
    def list(
        cls, db: Session, user: User, contact_id: int
    ) -> List[schemas.AddressResponse]:
        ContactService.check_contact_must_exist(db, user.username, contact_id)
        return [
            schemas.AddressResponse.model_validate(address)
            for address in crud.list_addresses(db, contact_id)
        ]
