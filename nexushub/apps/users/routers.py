"""
Users router.

Entry/exit only, no logic here. Calls user services.
"""

from fastapi import APIRouter, Depends

from nexushub.apps.users.models import User
from nexushub.apps.users.schemas import UserCreate, UserResponse
from nexushub.apps.users.services import add_user, remove_user
from nexushub.core.dependencies import get_state, require_admin
from nexushub.core.state import AppState
from nexushub.utils.responses import success_response

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.get("")
async def list_users(state: AppState = Depends(get_state)):
    """All users. Open to everyone: the login switcher lists them."""
    return success_response(
        status_code=200,
        message="Users",
        data=[UserResponse.model_validate(u).model_dump() for u in state.users],
    )


@router.post("", status_code=201)
async def create_user(
    data: UserCreate,
    admin: User = Depends(require_admin),
    state: AppState = Depends(get_state),
):
    """Admin only."""
    user = add_user(state=state, data=data)
    return success_response(
        status_code=201,
        message="User added successfully",
        data=UserResponse.model_validate(user).model_dump(),
    )


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    admin: User = Depends(require_admin),
    state: AppState = Depends(get_state),
):
    """Admin only. An admin cannot remove themself."""
    remove_user(state=state, user_id=user_id, acting_user=admin)
    return success_response(status_code=200, message="User removed")
