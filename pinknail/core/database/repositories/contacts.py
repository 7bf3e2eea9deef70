"""
Contact inquiry repository.

This module provides the admin inbox listing for contact form submissions
with status filter, free-text search and the supported sort keys.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pinknail.core.models.domain import ContactSortField, SortOrder

from ..entities.contacts import Contact
from .base import QueryBuilder, SQLModelRepository


class ContactRepository(SQLModelRepository[Contact]):
    """Repository for contact inquiries using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Contact)

    async def search(
        self,
        *,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: ContactSortField = ContactSortField.created_at,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Contact], int]:
        """List contact inquiries for one page.

        Args:
            status: Only inquiries in this triage status
            search: Case-insensitive substring of name, email, subject, message or phone
            sort_by: Primary sort key
            sort_order: Direction of the primary key (and of the name tie-breaker)
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (inquiries on the page, total matching inquiries)
        """
        stmt = select(Contact)
        stmt = QueryBuilder.apply_filters(stmt, Contact, {"status": status})
        stmt = QueryBuilder.apply_search(
            stmt,
            [
                Contact.first_name,
                Contact.last_name,
                Contact.email,
                Contact.subject,
                Contact.message,
                Contact.phone,
            ],
            search,
        )

        direction = "asc" if sort_order == SortOrder.asc else "desc"
        if sort_by == ContactSortField.status:
            order = [getattr(Contact.status, direction)(), Contact.created_at.desc()]  # type: ignore
        elif sort_by == ContactSortField.first_name:
            order = [getattr(Contact.first_name, direction)(), getattr(Contact.last_name, direction)()]
        elif sort_by == ContactSortField.last_name:
            order = [getattr(Contact.last_name, direction)(), getattr(Contact.first_name, direction)()]
        else:
            order = [getattr(Contact.created_at, direction)()]

        stmt = stmt.order_by(*order)
        return await self.paginate(stmt, page, limit)
