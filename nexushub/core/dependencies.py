"""
Dependency injection for FastAPI.

Provides singleton instances of services and the per-request
unit of work around the application state.
"""

from functools import lru_cache
from typing import AsyncIterator

from fastapi import Depends

from nexushub.apps.users.models import User
from nexushub.config.settings import settings
from nexushub.core.llm import ToolAnalyzer
from nexushub.core.state import AppState
from nexushub.core.storage import SnapshotStorage
from nexushub.utils.exceptions import PermissionDeniedException


@lru_cache()
def get_storage() -> SnapshotStorage:
    """Get snapshot storage singleton."""
    return SnapshotStorage(url=settings.REDIS_URL, prefix=settings.SNAPSHOT_KEY_PREFIX)


@lru_cache()
def get_app_state() -> AppState:
    """Get application state singleton."""
    return AppState(storage=get_storage())


@lru_cache()
def get_tool_analyzer() -> ToolAnalyzer:
    """Get tool analyzer singleton."""
    return ToolAnalyzer(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)


async def get_state(app_state: AppState = Depends(get_app_state)) -> AsyncIterator[AppState]:
    """
    Unit of work: load on first use, flush dirty snapshots after the route.

    A route that raises skips the flush.
    """
    await app_state.ensure_loaded()
    yield app_state
    await app_state.flush()


def get_current_user(state: AppState = Depends(get_state)) -> User:
    """The simulated-login user. Not an authentication boundary."""
    return state.current_user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Settings operations are admin only."""
    if not user.is_admin:
        raise PermissionDeniedException()
    return user
