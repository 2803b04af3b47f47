"""
Tests for AppState load/flush and mutations.

Run with: PYTHONPATH=. uv run pytest tests/test_state.py -v
"""

import json

import pytest

from nexushub.apps.tools.models import AccessLevel
from nexushub.apps.tools.services import filter_tools
from nexushub.core.constants import DEFAULT_DEPARTMENTS
from nexushub.core.state import AppState
from nexushub.core.storage import SnapshotStorage

from factories import InMemoryRedis, make_tool, make_user


@pytest.mark.asyncio
async def test_missing_keys_fall_back_to_seed(state, fake_redis):
    assert [u.id for u in state.users] == ["u1", "u2", "u3"]
    assert [t.id for t in state.tools] == ["t1", "t2", "t3", "t4"]
    assert state.departments == DEFAULT_DEPARTMENTS
    assert state.current_user.id == "u1"
    # Loading alone writes nothing
    assert fake_redis.writes == []
    assert state.dirty == set()


@pytest.mark.asyncio
async def test_persisted_snapshots_are_used_verbatim():
    fake = InMemoryRedis({
        "nexushub_users": json.dumps([{
            "id": "u7", "name": "Kim", "email": "kim@x.io", "avatar": "a",
            "department": "Legal", "isAdmin": False,
        }]),
        "nexushub_departments": json.dumps(["Legal"]),
    })
    state = AppState(SnapshotStorage(client=fake))
    await state.load()

    assert [u.id for u in state.users] == ["u7"]
    assert state.current_user.department == "Legal"
    assert state.departments == ["Legal"]
    # tools key absent -> seed
    assert len(state.tools) == 4


@pytest.mark.asyncio
async def test_empty_user_list_acts_as_first_seed_user():
    fake = InMemoryRedis({"nexushub_users": "[]"})
    state = AppState(SnapshotStorage(client=fake))
    await state.load()

    assert state.users == []
    assert state.current_user.id == "u1"


@pytest.mark.asyncio
async def test_malformed_snapshot_fails_load():
    fake = InMemoryRedis({"nexushub_tools": "{not json"})
    state = AppState(SnapshotStorage(client=fake))

    with pytest.raises(json.JSONDecodeError):
        await state.load()
    assert state.loaded is False


@pytest.mark.asyncio
async def test_unrecognized_access_level_loads_and_is_admin_only():
    fake = InMemoryRedis({
        "nexushub_tools": json.dumps([
            {
                "id": "t70", "name": "Team Wiki", "url": "https://wiki.example",
                "description": "", "category": "Other", "accessLevel": "TEAM",
                "department": "Sales", "createdBy": "u2", "tags": [],
            },
            {
                "id": "t71", "name": "Status Page", "url": "https://status.example",
                "description": "", "category": "Other", "accessLevel": "PUBLIC",
                "createdBy": "u1", "tags": [],
            },
        ]),
    })
    state = AppState(SnapshotStorage(client=fake))
    await state.load()

    team_tool, public_tool = state.tools
    assert team_tool.access_level == "TEAM"
    assert public_tool.access_level is AccessLevel.PUBLIC

    sales, admin = state.find_user("u2"), state.find_user("u1")
    assert [t.id for t in filter_tools(state.tools, sales)] == ["t71"]
    assert [t.id for t in filter_tools(state.tools, admin)] == ["t70", "t71"]

    # Written back unchanged
    state.add_tool(make_tool(id="t72"))
    await state.flush()
    assert fake.snapshot("nexushub_tools")[1]["accessLevel"] == "TEAM"


@pytest.mark.asyncio
async def test_flush_writes_only_dirty_collections(state, fake_redis):
    state.add_department("Legal")
    written = await state.flush()

    assert written == ["departments"]
    assert fake_redis.writes == ["nexushub_departments"]
    assert fake_redis.snapshot("nexushub_departments")[-1] == "Legal"
    assert state.dirty == set()

    # Nothing dirty, nothing written
    assert await state.flush() == []


@pytest.mark.asyncio
async def test_tool_snapshot_uses_camel_case(state, fake_redis):
    state.add_tool(make_tool(id="t99", created_by="u2", department="Sales"))
    await state.flush()

    saved = fake_redis.snapshot("nexushub_tools")
    assert saved[0]["id"] == "t99"
    assert saved[0]["createdBy"] == "u2"
    assert saved[0]["accessLevel"] == "PUBLIC"
    assert "created_by" not in saved[0]


@pytest.mark.asyncio
async def test_snapshot_round_trip_through_fresh_state(state, fake_redis):
    state.add_user(make_user(id="u50", department="HR", is_admin=True))
    await state.flush()

    reloaded = AppState(SnapshotStorage(client=fake_redis))
    await reloaded.load()

    user = reloaded.find_user("u50")
    assert user is not None and user.is_admin is True
    assert reloaded.tools == state.tools


@pytest.mark.asyncio
async def test_failed_write_keeps_collection_dirty(state, fake_redis):
    fake_redis.fail_writes = True
    state.add_department("Legal")

    assert await state.flush() == []
    assert state.dirty == {"departments"}

    fake_redis.fail_writes = False
    assert await state.flush() == ["departments"]


@pytest.mark.asyncio
async def test_new_tools_are_prepended_users_appended(state):
    state.add_tool(make_tool(id="tnew"))
    state.add_user(make_user(id="unew"))

    assert state.tools[0].id == "tnew"
    assert state.users[-1].id == "unew"


@pytest.mark.asyncio
async def test_removing_department_does_not_cascade(state):
    """u2 keeps 'Sales' after the department is deleted."""
    assert state.remove_department("Sales") is True

    assert "Sales" not in state.departments
    assert state.find_user("u2").department == "Sales"
    assert state.find_tool("t3").department == "Sales"


@pytest.mark.asyncio
async def test_store_itself_does_not_guard_self_removal(state):
    """The self-removal rule lives in the service layer."""
    assert state.remove_user(state.current_user_id) is True
    assert state.remove_user("missing") is False


@pytest.mark.asyncio
async def test_switch_user(state):
    assert state.switch_user("u2").id == "u2"
    assert state.current_user.id == "u2"
    assert state.switch_user("nobody") is None
    assert state.current_user.id == "u2"


@pytest.mark.asyncio
async def test_new_id_is_timestamp_based_and_unique(state, monkeypatch):
    monkeypatch.setattr("nexushub.core.state._epoch_ms", lambda: 1700000000000)

    first = state.new_id("t")
    state.add_tool(make_tool(id=first))
    second = state.new_id("t")

    assert first == "t1700000000000"
    assert second == "t1700000000001"
