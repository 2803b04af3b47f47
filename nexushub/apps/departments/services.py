"""
Department administration.

Departments are plain strings. Uniqueness is checked here at the call
site only; removal never cascades to users or tools.
"""

from typing import List

from nexushub.apps.departments.schemas import DepartmentCreate, DepartmentResponse
from nexushub.core.state import AppState
from nexushub.utils.exceptions import (
    DepartmentAlreadyExistsException,
    DepartmentNotFoundException,
)
from nexushub.utils.logger import get_logger

logger = get_logger(__name__)


def list_departments(state: AppState) -> List[DepartmentResponse]:
    return [
        DepartmentResponse(
            name=dept,
            user_count=sum(1 for u in state.users if u.department == dept),
        )
        for dept in state.departments
    ]


def add_department(state: AppState, data: DepartmentCreate) -> str:
    """
    Raises:
        DepartmentAlreadyExistsException: exact name already present
    """
    if data.name in state.departments:
        raise DepartmentAlreadyExistsException(f"Department already exists: {data.name}")

    state.add_department(data.name)
    logger.info(f"Added department: {data.name}")
    return data.name


def remove_department(state: AppState, name: str) -> None:
    """
    Users still assigned to `name` keep it as a dangling value.

    Raises:
        DepartmentNotFoundException: unknown name
    """
    if not state.remove_department(name):
        raise DepartmentNotFoundException(f"Department not found: {name}")

    orphaned = sum(1 for u in state.users if u.department == name)
    logger.info(f"Removed department: {name} (users still assigned: {orphaned})")
