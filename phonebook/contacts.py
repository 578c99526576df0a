"""Contact management routes for the Phonebook API."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from . import schemas, crud, models
from .database import get_db
from .auth import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


class ContactService:
    """
    Contact operations scoped to a single owner.

    Every query filters on ``owner_id``, so a contact is never visible to or
    changed by another user. Update and delete do not distinguish a missing
    contact from one owned by somebody else.
    """

    def __init__(self, db: Session, owner_id: int):
        self.db = db
        self.owner_id = owner_id

    def add(self, name: str, phone: str) -> models.Contact:
        contact = crud.create_contact(self.db, self.owner_id, name, phone)
        logger.debug("User %s added contact %s", self.owner_id, contact.id)
        return contact

    def list(self, search: str | None = None) -> List[models.Contact]:
        """Return the owner's contacts, optionally filtered by ``search``.

        The result has no guaranteed order.
        """
        return list(crud.get_contacts(self.db, self.owner_id, q=search))

    def update(self, contact_id: int, changes: dict) -> models.Contact | None:
        """Apply ``changes`` and return the contact, or ``None`` if no contact
        with this id belongs to the owner.

        Raises ``ValueError`` for keys outside ``crud.UPDATABLE_CONTACT_FIELDS``.
        """
        crud.check_contact_changes(changes)
        contact = crud.get_contact(self.db, contact_id, self.owner_id)
        if contact is None:
            return None
        contact = crud.update_contact(self.db, contact, changes)
        logger.debug("User %s updated contact %s", self.owner_id, contact_id)
        return contact

    def delete(self, contact_id: int) -> None:
        if crud.delete_contact(self.db, contact_id, self.owner_id):
            logger.debug("User %s deleted contact %s", self.owner_id, contact_id)


def get_contact_service(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> ContactService:
    """Dependency building a ``ContactService`` for the authenticated user."""
    return ContactService(db, user_id)


@router.post("", response_model=schemas.ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_in: schemas.ContactCreate,
    service: ContactService = Depends(get_contact_service),
):
    """
    Create a new contact owned by the current user.

    Args:
        contact_in (ContactCreate): Contact input data.
        service (ContactService): Contact service of the authenticated user.

    Returns:
        ContactOut: Created contact.
    """
    return service.add(contact_in.name, contact_in.phone)


@router.get("", response_model=List[schemas.ContactOut])
def list_contacts(
    search: str | None = Query(None),
    service: ContactService = Depends(get_contact_service),
):
    """
    Retrieve the contacts belonging to the current user.

    Supports optional case-insensitive search by name or phone.

    Args:
        search (str | None): Optional search term.
        service (ContactService): Contact service of the authenticated user.

    Returns:
        list[ContactOut]: List of contacts, in no particular order.
    """
    return service.list(search)


@router.put("/{contact_id}", response_model=Optional[schemas.ContactOut])
def update_contact(
    contact_id: int,
    changes: schemas.ContactUpdate,
    service: ContactService = Depends(get_contact_service),
):
    """
    Partially update an existing contact.

    Only fields provided in the request are updated. Responds with ``null``
    when the contact does not exist or belongs to another user; the two
    cases cannot be told apart.

    Args:
        contact_id (int): Contact identifier.
        changes (ContactUpdate): Fields to update.
        service (ContactService): Contact service of the authenticated user.

    Returns:
        ContactOut | None: Updated contact.
    """
    return service.update(
        contact_id, changes.model_dump(exclude_unset=True, exclude_none=True)
    )


@router.delete("/{contact_id}", response_model=schemas.Message)
def remove_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """
    Delete a contact owned by the current user.

    The confirmation is returned whether or not anything was deleted.

    Args:
        contact_id (int): Contact identifier.
        service (ContactService): Contact service of the authenticated user.

    Returns:
        dict: Deletion confirmation.
    """
    service.delete(contact_id)
    return {"msg": "Deleted"}
