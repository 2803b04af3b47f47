"""
Departments router.

Entry/exit only, no logic here. Calls department services.
"""

from fastapi import APIRouter, Depends

from nexushub.apps.departments.schemas import DepartmentCreate
from nexushub.apps.departments.services import (
    add_department,
    list_departments,
    remove_department,
)
from nexushub.apps.users.models import User
from nexushub.core.dependencies import get_state, require_admin
from nexushub.core.state import AppState
from nexushub.utils.responses import success_response

router = APIRouter(prefix="/api/v1/departments", tags=["Departments"])


@router.get("")
async def departments(state: AppState = Depends(get_state)):
    """Departments with the number of users assigned to each."""
    return success_response(
        status_code=200,
        message="Departments",
        data=[d.model_dump() for d in list_departments(state)],
    )


@router.post("", status_code=201)
async def create_department(
    data: DepartmentCreate,
    admin: User = Depends(require_admin),
    state: AppState = Depends(get_state),
):
    """Admin only."""
    name = add_department(state=state, data=data)
    return success_response(
        status_code=201,
        message="Department added successfully",
        data={"name": name},
    )


@router.delete("/{name:path}")
async def delete_department(
    name: str,
    admin: User = Depends(require_admin),
    state: AppState = Depends(get_state),
):
    """Admin only. Does not touch users assigned to the department."""
    remove_department(state=state, name=name)
    return success_response(status_code=200, message="Department removed")
