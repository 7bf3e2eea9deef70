"""
Nail Option Endpoints.

Nail shapes and nail styles expose the same operations. ``build_router``
creates one router per vocabulary from its service dependency.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.io import DataResponse, NailOptionCreate, NailOptionRead, NailOptionUpdate
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import get_nail_shape_service, get_nail_style_service
from pinknail.server.services.nail_options import NailOptionService


def build_router(get_service, label: str, tag: str) -> APIRouter:
    """
    Create the CRUD router of one nail option vocabulary.

    Args:
        get_service: Dependency returning the vocabulary's ``NailOptionService``
        label: Plural label used in endpoint summaries, e.g. ``"Nail Shapes"``
        tag: OpenAPI tag
    """
    router = APIRouter(tags=[tag])

    @router.get(
        "",
        response_model=DataResponse[NailOptionRead],
        summary=f"List {label}",
        description="List options ordered by sort index, oldest first within the same index.",
    )
    async def list_options(
        is_active: Optional[bool] = Query(default=None, alias="isActive"),
        service: NailOptionService = Depends(get_service),
    ) -> DataResponse[NailOptionRead]:
        options = await service.list(is_active=is_active)
        return DataResponse[NailOptionRead](data=[NailOptionRead.model_validate(option) for option in options])

    @router.post(
        "",
        response_model=NailOptionRead,
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(get_current_admin)],
        summary=f"Create {label}",
        responses={409: {"description": "Value already exists"}},
    )
    async def create_option(
        data: NailOptionCreate, service: NailOptionService = Depends(get_service)
    ) -> NailOptionRead:
        return NailOptionRead.model_validate(await service.create(data))

    @router.patch(
        "/{option_id}",
        response_model=NailOptionRead,
        dependencies=[Depends(get_current_admin)],
        summary=f"Update {label}",
        responses={404: {"description": "Option not found"}, 409: {"description": "Value already exists"}},
    )
    async def update_option(
        option_id: int, data: NailOptionUpdate, service: NailOptionService = Depends(get_service)
    ) -> NailOptionRead:
        return NailOptionRead.model_validate(await service.update(option_id, data))

    @router.delete(
        "/{option_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        dependencies=[Depends(get_current_admin)],
        summary=f"Delete {label}",
        responses={404: {"description": "Option not found"}},
    )
    async def delete_option(option_id: int, service: NailOptionService = Depends(get_service)) -> Response:
        await service.delete(option_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


nail_shapes_router = build_router(get_nail_shape_service, "Nail Shapes", "nail-shapes")
nail_styles_router = build_router(get_nail_style_service, "Nail Styles", "nail-styles")
