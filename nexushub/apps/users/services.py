"""
User administration.

The "cannot remove yourself" rule is checked here, before the store
is touched. AppState.remove_user itself will remove anyone.
"""

from urllib.parse import quote

from nexushub.apps.users.models import User
from nexushub.apps.users.schemas import UserCreate
from nexushub.core.constants import AVATAR_URL_TEMPLATE
from nexushub.core.state import AppState
from nexushub.utils.exceptions import (
    InvalidDepartmentError,
    SelfRemovalException,
    UserNotFoundException,
)
from nexushub.utils.logger import get_logger

logger = get_logger(__name__)


def avatar_for(name: str) -> str:
    return AVATAR_URL_TEMPLATE.format(seed=quote(name))


def add_user(state: AppState, data: UserCreate) -> User:
    """
    Append a user with a derived id and avatar.

    Raises:
        InvalidDepartmentError: department is not in the current list
    """
    # Guard: department must be one the Settings form could offer
    if data.department not in state.departments:
        raise InvalidDepartmentError(f"Invalid department: {data.department}")

    user = User(
        id=state.new_id("u"),
        name=data.name,
        email=str(data.email),
        avatar=avatar_for(data.name),
        department=data.department,
        is_admin=data.is_admin,
    )
    state.add_user(user)

    logger.info(f"Added user: {user.id} {user.email}, dept={user.department}, admin={user.is_admin}")
    return user


def remove_user(state: AppState, user_id: str, acting_user: User) -> None:
    """
    Raises:
        SelfRemovalException: target is the acting user
        UserNotFoundException: unknown id
    """
    if user_id == acting_user.id:
        raise SelfRemovalException()

    if not state.remove_user(user_id):
        raise UserNotFoundException()

    logger.info(f"Removed user: {user_id} by {acting_user.id}")


def switch_user(state: AppState, user_id: str) -> User:
    """
    Raises:
        UserNotFoundException: unknown id
    """
    user = state.switch_user(user_id)
    if user is None:
        raise UserNotFoundException()

    logger.info(f"Acting user switched to {user.id} ({user.department})")
    return user
