"""
Salon service menu business logic.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.services import Service
from pinknail.core.database.repositories import BookingRepository, ServiceRepository
from pinknail.core.exceptions import ConflictError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import ServiceCreate, ServiceUpdate

logger = get_logger(__name__)


class ServiceMenuService:
    """Service for managing the salon's service menu."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.services = ServiceRepository(session)
        self.bookings = BookingRepository(session)

    async def create(self, data: ServiceCreate) -> Service:
        """
        Create a service.

        Raises:
            ConflictError: If another service already uses the name
        """
        if await self.services.get_by_name(data.name):
            raise ConflictError(f'Service with name "{data.name}" already exists')
        service = await self.services.create(Service(**data.model_dump(mode="json")))
        logger.info(f"Created service {service.id} ({service.name})")
        return service

    async def get(self, service_id: int) -> Service:
        service = await self.services.get_by_id(service_id)
        if service is None:
            raise NotFoundError(f"Service with ID {service_id} not found")
        return service

    async def list(
        self,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        is_active: Optional[bool] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Service], int]:
        return await self.services.search(
            category=category, featured=featured, is_active=is_active, page=page, limit=limit
        )

    async def update(self, service_id: int, data: ServiceUpdate) -> Service:
        """
        Apply a partial update to a service.

        Raises:
            NotFoundError: If the service does not exist
            ConflictError: If the new name belongs to another service
        """
        service = await self.get(service_id)
        changes = data.model_dump(exclude_unset=True, mode="json")

        new_name = changes.get("name")
        if new_name is not None and new_name != service.name:
            existing = await self.services.get_by_name(new_name)
            if existing is not None and existing.id != service.id:
                raise ConflictError(f'Service with name "{new_name}" already exists')

        for key, value in changes.items():
            if value is not None or key == "image_url":
                setattr(service, key, value)
        service = await self.services.update(service)
        logger.info(f"Updated service {service.id}: {sorted(changes)}")
        return service

    async def delete(self, service_id: int) -> None:
        """
        Delete a service.

        Raises:
            NotFoundError: If the service does not exist
            ConflictError: While bookings still reference the service
        """
        service = await self.get(service_id)
        booking_count = await self.bookings.count_for_service(service_id)
        if booking_count:
            raise ConflictError(f"Cannot delete service: {booking_count} booking(s) reference this service")
        await self.services.delete(service.id)
        logger.info(f"Deleted service {service_id}")
