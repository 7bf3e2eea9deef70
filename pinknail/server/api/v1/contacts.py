"""
Contact Inquiry Endpoints.

The public contact form posts here; admins triage inquiries from the dashboard.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.domain import ContactSortField, ContactStatus, SortOrder
from pinknail.core.models.io import (
    ContactCreate,
    ContactNotesUpdate,
    ContactRead,
    ContactStatusUpdate,
    PaginatedResponse,
)
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import ContactServiceDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["contacts"])


@router.post(
    "",
    response_model=ContactRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Contact Inquiry",
    description="Submit a message from the public contact form.",
)
async def create_contact(data: ContactCreate, service: ContactServiceDep) -> ContactRead:
    """
    Submit a contact inquiry.

    - **message**: At least 10 characters.
    - **phone**: Optional.
    """
    return ContactRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=PaginatedResponse[ContactRead],
    dependencies=[Depends(get_current_admin)],
    summary="List Contact Inquiries",
)
async def list_contacts(
    service: ContactServiceDep,
    contact_status: Optional[ContactStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, max_length=100),
    sort_by: ContactSortField = Query(default=ContactSortField.created_at, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.desc, alias="sortOrder"),
    page: int = page_param(),
    limit: int = limit_param(),
) -> PaginatedResponse[ContactRead]:
    """
    List contact inquiries.

    - **search**: Case-insensitive match on name, email, subject, message or phone.
    - **sortBy**: createdAt, status (newest first within a status), firstName or lastName.
    """
    items, total = await service.list(
        status=contact_status, search=search, sort_by=sort_by, sort_order=sort_order, page=page, limit=limit
    )
    return build_page(ContactRead, items, total, page, limit)


@router.get(
    "/{contact_id}",
    response_model=ContactRead,
    dependencies=[Depends(get_current_admin)],
    summary="Get Contact Inquiry",
    responses={404: {"description": "Contact not found"}},
)
async def get_contact(contact_id: int, service: ContactServiceDep) -> ContactRead:
    return ContactRead.model_validate(await service.get(contact_id))


@router.patch(
    "/{contact_id}/status",
    response_model=ContactRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Contact Status",
    description="Change the triage status. Moving to responded records the response time.",
    responses={404: {"description": "Contact not found"}},
)
async def update_contact_status(
    contact_id: int, data: ContactStatusUpdate, service: ContactServiceDep
) -> ContactRead:
    return ContactRead.model_validate(await service.update_status(contact_id, data.status, data.admin_notes))


@router.patch(
    "/{contact_id}/notes",
    response_model=ContactRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Contact Notes",
    responses={404: {"description": "Contact not found"}},
)
async def update_contact_notes(contact_id: int, data: ContactNotesUpdate, service: ContactServiceDep) -> ContactRead:
    return ContactRead.model_validate(await service.update_notes(contact_id, data.admin_notes))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)],
    summary="Delete Contact Inquiry",
    responses={404: {"description": "Contact not found"}},
)
async def delete_contact(contact_id: int, service: ContactServiceDep) -> Response:
    await service.delete(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
