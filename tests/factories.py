"""
Test doubles and record factories.
"""

import json
from typing import Optional

from nexushub.apps.tools.models import AccessLevel, Tool
from nexushub.apps.tools.schemas import ToolSuggestion
from nexushub.apps.users.models import User


class InMemoryRedis:
    """The subset of redis.asyncio.Redis that SnapshotStorage uses."""

    def __init__(self, data: Optional[dict] = None):
        self.data = dict(data or {})
        self.fail_writes = False
        self.writes = []

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        if self.fail_writes:
            raise ConnectionError("redis unavailable")
        self.data[key] = value
        self.writes.append(key)
        return True

    async def ping(self):
        return True

    async def aclose(self):
        return None

    def snapshot(self, key):
        return json.loads(self.data[key])


class FakeAnalyzer:
    """Stands in for ToolAnalyzer; records calls."""

    def __init__(self, suggestion: Optional[ToolSuggestion] = None):
        self.suggestion = suggestion
        self.calls = []

    async def analyze(self, name, url):
        self.calls.append((name, url))
        return self.suggestion


def make_user(id="ux", department="Sales", is_admin=False, **kwargs) -> User:
    return User(
        id=id,
        name=kwargs.pop("name", f"User {id}"),
        email=kwargs.pop("email", f"{id}@nexushub.com"),
        avatar=kwargs.pop("avatar", "https://picsum.photos/100/100"),
        department=department,
        is_admin=is_admin,
        **kwargs,
    )


def make_tool(
    id="tx",
    access_level=AccessLevel.PUBLIC,
    department=None,
    created_by="u1",
    **kwargs,
) -> Tool:
    return Tool(
        id=id,
        name=kwargs.pop("name", f"Tool {id}"),
        url=kwargs.pop("url", "https://example.com"),
        description=kwargs.pop("description", ""),
        category=kwargs.pop("category", "Other"),
        access_level=access_level,
        department=department,
        created_by=created_by,
        **kwargs,
    )

