"""
Application state.

One AppState holds every collection plus the acting user. It is handed
to routes through FastAPI dependencies instead of living in module globals.

Lifecycle:
    state = AppState(storage)
    await state.load()    # once, at startup or on first request
    ...mutations...       # synchronous, mark collections dirty
    await state.flush()   # after each request, writes dirty snapshots only
"""

import time
from typing import List, Optional, Set

from nexushub.apps.tools.models import Tool
from nexushub.apps.users.models import User
from nexushub.core.constants import seed_departments, seed_tools, seed_users
from nexushub.core.storage import SnapshotStorage
from nexushub.utils.logger import get_logger

logger = get_logger(__name__)


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class AppState:
    """
    In-memory entity store with explicit persistence.

    Mutations replace whole lists (never in-place edits), so a snapshot
    taken during flush is never observed half-updated.
    Guards such as "cannot remove yourself" or "department already exists"
    live in the services, not here.
    """

    def __init__(self, storage: SnapshotStorage):
        self.storage = storage
        self.users: List[User] = []
        self.tools: List[Tool] = []
        self.departments: List[str] = []
        self.current_user_id: Optional[str] = None
        self._loaded = False
        self._dirty: Set[str] = set()

    # ── Lifecycle ─────────────────────────────────────────────────────────

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def dirty(self) -> Set[str]:
        return set(self._dirty)

    async def load(self) -> None:
        """
        Read all three snapshots; a missing key falls back to the seed.

        Malformed snapshots are not caught: load fails loudly.
        """
        raw_users = await self.storage.load("users")
        raw_tools = await self.storage.load("tools")
        raw_departments = await self.storage.load("departments")

        self.users = seed_users() if raw_users is None else User.many_from_snapshot(raw_users)
        self.tools = seed_tools() if raw_tools is None else Tool.many_from_snapshot(raw_tools)
        self.departments = (
            seed_departments() if raw_departments is None else [str(d) for d in raw_departments]
        )

        # Simulated login: first user in the list
        self.current_user_id = self.users[0].id if self.users else seed_users()[0].id
        self._dirty.clear()
        self._loaded = True

        logger.info(
            f"State loaded: users={len(self.users)}, tools={len(self.tools)}, "
            f"departments={len(self.departments)}, acting={self.current_user_id}"
        )

    async def ensure_loaded(self) -> None:
        if not self._loaded:
            await self.load()

    async def flush(self) -> List[str]:
        """
        Persist dirty collections, one key each.

        A collection whose write failed stays dirty and goes out with the
        next flush.

        Returns:
            Names of the collections written.
        """
        written = []
        for collection in sorted(self._dirty):
            payload = self._snapshot(collection)
            if await self.storage.save(collection, payload):
                self._dirty.discard(collection)
                written.append(collection)
        return written

    def _snapshot(self, collection: str) -> list:
        if collection == "users":
            return [u.to_snapshot() for u in self.users]
        if collection == "tools":
            return [t.to_snapshot() for t in self.tools]
        return list(self.departments)

    # ── Acting user ───────────────────────────────────────────────────────

    @property
    def current_user(self) -> User:
        user = self.find_user(self.current_user_id)
        if user is None:
            return seed_users()[0]
        return user

    def switch_user(self, user_id: str) -> Optional[User]:
        """Change the acting user. Not persisted. Returns None for unknown ids."""
        user = self.find_user(user_id)
        if user is not None:
            self.current_user_id = user.id
        return user

    # ── Lookups ───────────────────────────────────────────────────────────

    def find_user(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_tool(self, tool_id: str) -> Optional[Tool]:
        return next((t for t in self.tools if t.id == tool_id), None)

    def new_id(self, prefix: str) -> str:
        """Timestamp-derived id ('u1718…', 't1718…'), bumped past collisions."""
        taken = {u.id for u in self.users} | {t.id for t in self.tools}
        stamp = _epoch_ms()
        while f"{prefix}{stamp}" in taken:
            stamp += 1
        return f"{prefix}{stamp}"

    # ── Mutations ─────────────────────────────────────────────────────────

    def add_tool(self, tool: Tool) -> Tool:
        """Newest tools come first."""
        self.tools = [tool, *self.tools]
        self._dirty.add("tools")
        return tool

    def add_user(self, user: User) -> User:
        self.users = [*self.users, user]
        self._dirty.add("users")
        return user

    def remove_user(self, user_id: str) -> bool:
        remaining = [u for u in self.users if u.id != user_id]
        removed = len(remaining) != len(self.users)
        self.users = remaining
        if removed:
            self._dirty.add("users")
        return removed

    def add_department(self, name: str) -> str:
        self.departments = [*self.departments, name]
        self._dirty.add("departments")
        return name

    def remove_department(self, name: str) -> bool:
        """Users assigned to `name` keep it (no cascade)."""
        remaining = [d for d in self.departments if d != name]
        removed = len(remaining) != len(self.departments)
        self.departments = remaining
        if removed:
            self._dirty.add("departments")
        return removed
