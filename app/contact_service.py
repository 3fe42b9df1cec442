"""Business logic for contacts.

All operations are scoped to the authenticated user: a contact owned by
someone else is reported exactly like a contact that does not exist.
"""

import logging
import math
from typing import Any, Mapping

from sqlalchemy.orm import Session

from . import crud, schemas
from .errors import NotFoundError
from .models import MAX_ROW_ID, Contact, User
from .validation import validate

logger = logging.getLogger(__name__)


class ContactService:
    @classmethod
    def check_contact_must_exist(
        cls, db: Session, username: str, contact_id: int
    ) -> Contact:
        """
        Fetch a contact by id and owner.

        Raises:
            NotFoundError: If no contact with this id belongs to ``username``.
        """
        if not 0 <= contact_id <= MAX_ROW_ID:
            raise NotFoundError("contact not found")
        contact = crud.get_contact(db, username, contact_id)
        if contact is None:
            raise NotFoundError("contact not found")
        return contact

    @classmethod
    def create(
        cls,
        db: Session,
        user: User,
        request: Mapping[str, Any] | schemas.CreateContactRequest,
    ) -> schemas.ContactResponse:
        create_request = validate(schemas.CreateContactRequest, request)
        contact = crud.create_contact(db, user.username, create_request.model_dump())
        logger.info("Created contact %s for %s", contact.id, user.username)
        return schemas.ContactResponse.model_validate(contact)

    @classmethod
    def get(cls, db: Session, user: User, contact_id: int) -> schemas.ContactResponse:
        contact = cls.check_contact_must_exist(db, user.username, contact_id)
        return schemas.ContactResponse.model_validate(contact)

    @classmethod
    def update(
        cls,
        db: Session,
        user: User,
        contact_id: int,
        request: Mapping[str, Any] | schemas.UpdateContactRequest,
    ) -> schemas.ContactResponse:
        """Overwrite the fields present in ``request``; others keep their value."""
        update_request = validate(schemas.UpdateContactRequest, request)
        contact = cls.check_contact_must_exist(db, user.username, contact_id)

        contact = crud.update_contact(
            db, contact, update_request.model_dump(exclude_unset=True)
        )
        logger.info("Updated contact %s for %s", contact.id, user.username)
        return schemas.ContactResponse.model_validate(contact)

    @classmethod
    def remove(cls, db: Session, user: User, contact_id: int) -> schemas.ContactResponse:
        contact = cls.check_contact_must_exist(db, user.username, contact_id)
        # projection must be taken before the row is gone
        response = schemas.ContactResponse.model_validate(contact)
        crud.delete_contact(db, contact)
        logger.info("Deleted contact %s for %s", contact_id, user.username)
        return response

    @classmethod
    def search(
        cls,
        db: Session,
        user: User,
        request: Mapping[str, Any] | schemas.SearchContactRequest,
    ) -> schemas.PageResponse[schemas.ContactResponse]:
        """
        Search the user's contacts.

        ``name`` matches first or last name, ``email`` and ``phone`` match
        their own column; given filters must all match. ``total_page`` is
        ``ceil(total / size)``, and a page past the end yields no rows.

        Args:
            db (Session): Database session.
            user (User): Authenticated user.
            request: Filters plus ``page`` (from 1) and ``size``.

        Returns:
            PageResponse[ContactResponse]: Rows of the page and paging metadata.
        """
        search_request = validate(schemas.SearchContactRequest, request)
        skip = (search_request.page - 1) * search_request.size

        contacts, total = crud.search_contacts(
            db,
            user.username,
            name=search_request.name,
            email=search_request.email,
            phone=search_request.phone,
            skip=skip,
            limit=search_request.size,
        )

        return schemas.PageResponse[schemas.ContactResponse](
            data=[schemas.ContactResponse.model_validate(c) for c in contacts],
            paging=schemas.Paging(
                current_page=search_request.page,
                total_page=math.ceil(total / search_request.size),
                size=search_request.size,
            ),
        )
