"""CRUD operations for users, contacts and addresses.

This module contains database interaction logic, isolated from the
services and the FastAPI route handlers. Contact queries always filter
on the owner's username and address queries on the parent contact id.
"""

from sqlalchemy import select, func, or_, and_
from sqlalchemy.orm import Session

from . import models


def get_user_by_username(db: Session, username: str) -> models.User | None:
    """
    Retrieve a user by username.

    Args:
        db (Session): Database session.
        username (str): Identity key of the user.

    Returns:
        User | None: User if found, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.username == username)
    ).scalar_one_or_none()


def count_users_by_username(db: Session, username: str) -> int:
    """
    Count users holding a username (0 or 1).

    Args:
        db (Session): Database session.
        username (str): Identity key to look for.

    Returns:
        int: Number of matching users.
    """
    return db.scalar(
        select(func.count()).select_from(models.User).where(
            models.User.username == username
        )
    )


def get_user_by_token(db: Session, token: str) -> models.User | None:
    """
    Retrieve the user currently holding ``token``.

    Args:
        db (Session): Database session.
        token (str): Bearer token presented by the client.

    Returns:
        User | None: User if the token is live, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.token == token)
    ).scalar_one_or_none()


def create_user(
    db: Session, username: str, hashed_password: str, name: str
) -> models.User:
    """
    Create and persist a new user.

    The username is the primary key, so a concurrent insert of the same
    username fails on commit with ``IntegrityError``; the session is
    rolled back before the error propagates.

    Args:
        db (Session): SQLAlchemy database session.
        username (str): Identity key.
        hashed_password (str): Securely hashed password.
        name (str): Display name.

    Returns:
        User: Newly created user instance.
    """
    user = models.User(username=username, password=hashed_password, name=name)
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def save_user(db: Session, user: models.User, changes: dict) -> models.User:
    """
    Apply ``changes`` to a user and persist them.

    Args:
        db (Session): Database session.
        user (User): Target user.
        changes (dict): Column values to set.

    Returns:
        User: Updated user instance.
    """
    for key, value in changes.items():
        setattr(user, key, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_contact(db: Session, username: str, contact_id: int) -> models.Contact | None:
    """
    Retrieve a single contact owned by the given user.

    Args:
        db (Session): Database session.
        username (str): Contact owner.
        contact_id (int): Contact identifier.

    Returns:
        Contact | None: Contact if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Contact).where(
            models.Contact.id == contact_id,
            models.Contact.username == username,
        )
    ).scalar_one_or_none()


def create_contact(db: Session, username: str, data: dict) -> models.Contact:
    """
    Create a new contact owned by the given user.

    Args:
        db (Session): Database session.
        username (str): Owner of the contact.
        data (dict): Contact fields.

    Returns:
        Contact: Newly created contact.
    """
    contact = models.Contact(**data, username=username)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def update_contact(db: Session, contact: models.Contact, changes: dict) -> models.Contact:
    """
    Update mutable fields of a contact.

    Args:
        db (Session): Database session.
        contact (Contact): Contact instance.
        changes (dict): Fields to update.

    Returns:
        Contact: Updated contact.
    """
    for key, value in changes.items():
        setattr(contact, key, value)

    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def delete_contact(db: Session, contact: models.Contact) -> None:
    """
    Delete a contact from the database.

    Args:
        db (Session): Database session.
        contact (Contact): Contact to delete.
    """
    db.delete(contact)
    db.commit()


def search_contacts(
    db: Session,
    username: str,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    skip: int = 0,
    limit: int = 10,
) -> tuple[list[models.Contact], int]:
    """
    Retrieve one page of a user's contacts matching the given filters.

    Filters are combined with AND. ``name`` matches either the first or
    the last name. All filters are substring matches; case sensitivity
    follows the database's ``LIKE``.

    Args:
        db (Session): Database session.
        username (str): Contact owner.
        name (str | None): Substring of first or last name.
        email (str | None): Substring of email.
        phone (str | None): Substring of phone.
        skip (int): Number of records to skip.
        limit (int): Maximum number of records to return.

    Returns:
        tuple[list[Contact], int]: Page of contacts and the total match count.
    """
    filters = [models.Contact.username == username]
    if name:
        filters.append(
            or_(
                models.Contact.first_name.contains(name, autoescape=True),
                models.Contact.last_name.contains(name, autoescape=True),
            )
        )
    if email:
        filters.append(models.Contact.email.contains(email, autoescape=True))
    if phone:
        filters.append(models.Contact.phone.contains(phone, autoescape=True))

    condition = and_(*filters)
    total = db.scalar(
        select(func.count()).select_from(models.Contact).where(condition)
    )
    if skip >= total:
        # past the last page; skip may be too large for OFFSET
        return [], total

    contacts = db.scalars(
        select(models.Contact)
        .where(condition)
        .order_by(models.Contact.id)
        .offset(skip)
        .limit(limit)
    ).all()
    return list(contacts), total


def get_address(db: Session, contact_id: int, address_id: int) -> models.Address | None:
    """
    Retrieve an address recorded under the given contact.

    Args:
        db (Session): Database session.
        contact_id (int): Parent contact identifier.
        address_id (int): Address identifier.

    Returns:
        Address | None: Address if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Address).where(
            models.Address.id == address_id,
            models.Address.contact_id == contact_id,
        )
    ).scalar_one_or_none()


def list_addresses(db: Session, contact_id: int) -> list[models.Address]:
    """
    Retrieve every address of a contact, ordered by id.

    Args:
        db (Session): Database session.
        contact_id (int): Parent contact identifier.

    Returns:
        list[Address]: Addresses of the contact.
    """
    return list(
        db.scalars(
            select(models.Address)
            .where(models.Address.contact_id == contact_id)
            .order_by(models.Address.id)
        ).all()
    )


def create_address(db: Session, contact_id: int, data: dict) -> models.Address:
    """
    Create a new address for the given contact.

    Args:
        db (Session): Database session.
        contact_id (int): Parent contact identifier.
        data (dict): Address fields.

    Returns:
        Address: Newly created address.
    """
    address = models.Address(**data, contact_id=contact_id)
    db.add(address)
    db.commit()
    db.refresh(address)
    return address


def update_address(db: Session, address: models.Address, changes: dict) -> models.Address:
    """
    Update mutable fields of an address.

    Args:
        db (Session): Database session.
        address (Address): Address instance.
        changes (dict): Fields to update.

    Returns:
        Address: Updated address.
    """
    for key, value in changes.items():
        setattr(address, key, value)

    db.add(address)
    db.commit()
    db.refresh(address)
    return address


def delete_address(db: Session, address: models.Address) -> None:
    """
    Delete an address from the database.

    Args:
        db (Session): Database session.
        address (Address): Address to delete.
    """
    db.delete(address)
    db.commit()
