"""CRUD operations for users and contacts.

This module contains database interaction logic for user and contact
entities, isolated from FastAPI route handlers. Every function takes the
session explicitly and issues a single query; contact functions always
filter on the owning user.
"""

from sqlalchemy import select, or_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models
from .errors import Conflict

#: Contact columns a client may change
UPDATABLE_CONTACT_FIELDS = frozenset({"name", "phone"})


def create_user(db: Session, email: str, hashed_password: str) -> models.User:
    """
    Create and persist a new user.

    Args:
        db (Session): SQLAlchemy database session.
        email (str): Normalized email address.
        hashed_password (str): Securely hashed password.

    Raises:
        Conflict: If a user with the same email already exists.

    Returns:
        User: Newly created user instance.
    """
    user = models.User(email=email, hashed_password=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent signup with the same email
        db.rollback()
        raise Conflict()
    db.refresh(user)
    return user


def get_user_by_email(db: Session, email: str) -> models.User | None:
    """
    Retrieve a user by email address.

    Args:
        db (Session): Database session.
        email (str): User email.

    Returns:
        User | None: User if found, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.email == email)
    ).scalar_one_or_none()


def create_contact(
    db: Session, owner_id: int, name: str, phone: str
) -> models.Contact:
    """
    Create a new contact owned by the given user.

    Args:
        db (Session): Database session.
        owner_id (int): Identifier of the owner.
        name (str): Contact name.
        phone (str): Contact phone.

    Returns:
        Contact: Newly created contact.
    """
    contact = models.Contact(owner_id=owner_id, name=name, phone=phone)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def get_contact(db: Session, contact_id: int, owner_id: int):
    """
    Retrieve a single contact owned by the given user.

    Args:
        db (Session): Database session.
        contact_id (int): Contact identifier.
        owner_id (int): Identifier of the owner.

    Returns:
        Contact | None: Contact if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Contact).where(
            models.Contact.id == contact_id,
            models.Contact.owner_id == owner_id,
        )
    ).scalar_one_or_none()


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def get_contacts(db: Session, owner_id: int, q: str | None = None):
    """
    Retrieve the contacts of the given user.

    Supports optional case-insensitive substring search by name or phone.
    The search term is matched literally. No ordering is applied.

    Args:
        db (Session): Database session.
        owner_id (int): Identifier of the owner.
        q (str | None): Optional search query.

    Returns:
        list[Contact]: List of contacts.
    """
    stmt = select(models.Contact).where(models.Contact.owner_id == owner_id)

    if q:
        # lower() on SQLite is replaced by a Unicode-aware one, see database.py
        like_q = _like_pattern(q.lower())
        stmt = stmt.where(
            or_(
                func.lower(models.Contact.name).like(like_q, escape="\\"),
                func.lower(models.Contact.phone).like(like_q, escape="\\"),
            )
        )

    return db.scalars(stmt).all()


def check_contact_changes(changes: dict) -> None:
    """Raise ``ValueError`` if ``changes`` touches a non-updatable field."""
    unknown = set(changes) - UPDATABLE_CONTACT_FIELDS
    if unknown:
        raise ValueError(f"Cannot update contact fields: {sorted(unknown)}")


def update_contact(db: Session, contact: models.Contact, changes: dict):
    """
    Update mutable fields of a contact.

    Args:
        db (Session): Database session.
        contact (Contact): Contact instance.
        changes (dict): Fields to update, a subset of
            ``UPDATABLE_CONTACT_FIELDS``.

    Raises:
        ValueError: If ``changes`` contains any other key.

    Returns:
        Contact: Updated contact.
    """
    check_contact_changes(changes)
    for key, value in changes.items():
        setattr(contact, key, value)

    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def delete_contact(db: Session, contact_id: int, owner_id: int) -> bool:
    """
    Delete a contact owned by the given user.

    Args:
        db (Session): Database session.
        contact_id (int): Contact identifier.
        owner_id (int): Identifier of the owner.

    Returns:
        bool: ``True`` if a row was deleted.
    """
    contact = get_contact(db, contact_id, owner_id)
    if contact is None:
        return False
    db.delete(contact)
    db.commit()
    return True
