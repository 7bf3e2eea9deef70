"""
Contact inquiry business logic.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.base import utc_now
from pinknail.core.database.entities.contacts import Contact
from pinknail.core.database.repositories import ContactRepository
from pinknail.core.exceptions import NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import ContactSortField, ContactStatus, SortOrder
from pinknail.core.models.io import ContactCreate
from pinknail.core.monitoring import log_contact_submitted

logger = get_logger(__name__)


class ContactService:
    """Service for contact form inquiries and their admin triage."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.contacts = ContactRepository(session)

    async def create(self, data: ContactCreate) -> Contact:
        contact = await self.contacts.create(
            Contact(**data.model_dump(mode="json"), status=ContactStatus.new.value)
        )
        logger.info(f"Received contact inquiry {contact.id}")
        log_contact_submitted(contact.id, contact.subject)
        return contact

    async def get(self, contact_id: int) -> Contact:
        contact = await self.contacts.get_by_id(contact_id)
        if contact is None:
            raise NotFoundError(f"Contact with ID {contact_id} not found")
        return contact

    async def list(
        self,
        status: Optional[ContactStatus] = None,
        search: Optional[str] = None,
        sort_by: ContactSortField = ContactSortField.created_at,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Contact], int]:
        return await self.contacts.search(
            status=status.value if status else None,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )

    async def update_status(
        self, contact_id: int, status: ContactStatus, admin_notes: Optional[str] = None
    ) -> Contact:
        """
        Move an inquiry to ``status``.

        ``respondedAt`` is stamped when the inquiry becomes ``responded``.

        Args:
            contact_id: Inquiry to update
            status: New triage status
            admin_notes: Replaces the stored notes when given
        """
        contact = await self.get(contact_id)
        if status == ContactStatus.responded and contact.status != ContactStatus.responded.value:
            contact.responded_at = utc_now()
        contact.status = status.value
        if admin_notes is not None:
            contact.admin_notes = admin_notes
        contact = await self.contacts.update(contact)
        logger.info(f"Contact {contact_id} status -> {contact.status}")
        return contact

    async def update_notes(self, contact_id: int, admin_notes: str) -> Contact:
        contact = await self.get(contact_id)
        contact.admin_notes = admin_notes
        return await self.contacts.update(contact)

    async def delete(self, contact_id: int) -> None:
        await self.get(contact_id)
        await self.contacts.delete(contact_id)
        logger.info(f"Deleted contact {contact_id}")
