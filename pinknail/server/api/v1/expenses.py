"""
Expense Endpoints.

Admin bookkeeping of salon expenses. Every route requires an admin token.
"""

import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.domain import ExpenseCategory, ExpenseSortField, SortOrder
from pinknail.core.models.io import ExpenseCreate, ExpenseRead, ExpenseUpdate, PaginatedResponse
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import ExpenseServiceDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["expenses"], dependencies=[Depends(get_current_admin)])


@router.post(
    "",
    response_model=ExpenseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Expense",
)
async def create_expense(data: ExpenseCreate, service: ExpenseServiceDep) -> ExpenseRead:
    """
    Record an expense.

    - **amount**: String with up to two decimal places, e.g. "125.50".
    - **category**: One of supplies, materials, utilities, other.
    - **currency**: ISO 4217 code, defaults to USD.
    """
    return ExpenseRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=PaginatedResponse[ExpenseRead],
    summary="List Expenses",
    responses={400: {"description": "startDate is after endDate"}},
)
async def list_expenses(
    service: ExpenseServiceDep,
    start_date: Optional[dt.date] = Query(default=None, alias="startDate"),
    end_date: Optional[dt.date] = Query(default=None, alias="endDate"),
    category: Optional[ExpenseCategory] = None,
    sort_by: ExpenseSortField = Query(default=ExpenseSortField.date, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.desc, alias="sortOrder"),
    page: int = page_param(),
    limit: int = limit_param(default=20),
) -> PaginatedResponse[ExpenseRead]:
    """
    List expenses, newest date first by default.

    - **startDate** / **endDate**: Inclusive date range.
    - **sortBy**: date, amount or createdAt.
    """
    items, total = await service.list(
        start_date=start_date,
        end_date=end_date,
        category=category.value if category else None,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return build_page(ExpenseRead, items, total, page, limit)


@router.get(
    "/{expense_id}",
    response_model=ExpenseRead,
    summary="Get Expense",
    responses={404: {"description": "Expense not found"}},
)
async def get_expense(expense_id: int, service: ExpenseServiceDep) -> ExpenseRead:
    return ExpenseRead.model_validate(await service.get(expense_id))


@router.patch(
    "/{expense_id}",
    response_model=ExpenseRead,
    summary="Update Expense",
    description="Partially update an expense. Only the submitted fields change.",
    responses={404: {"description": "Expense not found"}},
)
async def update_expense(expense_id: int, data: ExpenseUpdate, service: ExpenseServiceDep) -> ExpenseRead:
    return ExpenseRead.model_validate(await service.update(expense_id, data))


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Expense",
    responses={404: {"description": "Expense not found"}},
)
async def delete_expense(expense_id: int, service: ExpenseServiceDep) -> Response:
    await service.delete(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
