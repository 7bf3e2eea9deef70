"""
Nail shape and nail style business logic.

Both vocabularies behave identically; one service class is instantiated per
table with the label used in error messages.
"""

from __future__ import annotations

from typing import List, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.nail_options import NailShape, NailStyle
from pinknail.core.database.repositories import NailOptionRepository
from pinknail.core.database.repositories.nail_options import NailOption
from pinknail.core.exceptions import ConflictError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import NailOptionCreate, NailOptionUpdate

logger = get_logger(__name__)


class NailOptionService:
    """Service for one nail option vocabulary."""

    def __init__(self, session: AsyncSession, model: Type[NailOption], label: str):
        """
        Args:
            session: Async database session
            model: ``NailShape`` or ``NailStyle``
            label: Human-readable name used in messages, e.g. ``"Nail shape"``
        """
        self.session = session
        self.model = model
        self.label = label
        self.options = NailOptionRepository(session, model)

    async def list(self, is_active: Optional[bool] = None) -> List[NailOption]:
        return await self.options.list_ordered(is_active=is_active)

    async def get(self, option_id: int) -> NailOption:
        option = await self.options.get_by_id(option_id)
        if option is None:
            raise NotFoundError(f"{self.label} with ID {option_id} not found")
        return option

    async def create(self, data: NailOptionCreate) -> NailOption:
        await self._ensure_value_free(data.value)
        option = await self.options.create(self.model(**data.model_dump()))
        logger.info(f"Created {self.label.lower()} {option.value}")
        return option

    async def update(self, option_id: int, data: NailOptionUpdate) -> NailOption:
        option = await self.get(option_id)
        changes = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        if "value" in changes and changes["value"] != option.value:
            await self._ensure_value_free(changes["value"])
        for key, value in changes.items():
            setattr(option, key, value)
        return await self.options.update(option)

    async def delete(self, option_id: int) -> None:
        await self.get(option_id)
        await self.options.delete(option_id)
        logger.info(f"Deleted {self.label.lower()} {option_id}")

    async def _ensure_value_free(self, value: str) -> None:
        if await self.options.get_by_value(value):
            raise ConflictError(f'{self.label} with value "{value}" already exists')


def nail_shape_service(session: AsyncSession) -> NailOptionService:
    return NailOptionService(session, NailShape, "Nail shape")


def nail_style_service(session: AsyncSession) -> NailOptionService:
    return NailOptionService(session, NailStyle, "Nail style")
