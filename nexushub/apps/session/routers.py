"""
Session router.

Simulated login: the acting user is picked from the user list.
"""

from fastapi import APIRouter, Depends

from nexushub.apps.users.models import User
from nexushub.apps.users.schemas import SwitchUserRequest, UserResponse
from nexushub.apps.users.services import switch_user
from nexushub.core.dependencies import get_current_user, get_state
from nexushub.core.state import AppState
from nexushub.utils.responses import success_response

router = APIRouter(prefix="/api/v1/session", tags=["Session"])


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """Return the acting user's profile."""
    return success_response(
        status_code=200,
        message="User profile",
        data=UserResponse.model_validate(user).model_dump(),
    )


@router.post("/switch")
async def switch(
    data: SwitchUserRequest,
    state: AppState = Depends(get_state),
):
    """Act as another user. Kept in memory only."""
    user = switch_user(state=state, user_id=data.user_id)
    return success_response(
        status_code=200,
        message=f"Now acting as {user.name}",
        data=UserResponse.model_validate(user).model_dump(),
    )
