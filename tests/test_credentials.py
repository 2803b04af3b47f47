"""
Tests for the credential gate and card rendering.

Run with: PYTHONPATH=. uv run pytest tests/test_credentials.py -v
"""

import pytest

from nexushub.apps.tools import services
from nexushub.apps.tools.models import AccessLevel, ToolCredentials
from nexushub.apps.tools.schemas import MASKED_PASSWORD, CredentialsInput
from nexushub.apps.tools.services import (
    build_card,
    can_view_credentials,
    get_tool_credentials,
    normalize_credentials,
)
from nexushub.utils.exceptions import CredentialsHiddenException, ToolNotFoundException

from factories import make_tool, make_user

SECRET = ToolCredentials(username="svc", password="hunter2", notes="Use VPN")


@pytest.mark.parametrize("department", ["Sales", "Engineering", "HR"])
def test_private_credentials_never_for_non_creator(department):
    tool = make_tool(
        access_level=AccessLevel.PRIVATE,
        department=department,
        created_by="owner",
        credentials=SECRET,
    )
    viewer = make_user(id="viewer", department=department)
    assert can_view_credentials(tool, viewer) is False


def test_private_credentials_for_creator_and_admin():
    tool = make_tool(access_level=AccessLevel.PRIVATE, created_by="owner", credentials=SECRET)

    assert can_view_credentials(tool, make_user(id="owner")) is True
    assert can_view_credentials(tool, make_user(id="boss", is_admin=True)) is True


def test_department_and_public_credentials():
    dept_tool = make_tool(access_level=AccessLevel.DEPARTMENT, department="Sales", created_by="x")
    public_tool = make_tool(access_level=AccessLevel.PUBLIC, created_by="x")

    assert can_view_credentials(dept_tool, make_user(department="Sales")) is True
    assert can_view_credentials(dept_tool, make_user(department="HR")) is False
    assert can_view_credentials(public_tool, make_user(department="HR")) is True


def test_creator_passes_gate_even_when_tool_is_not_listed():
    """The two gates are independent."""
    tool = make_tool(access_level=AccessLevel.DEPARTMENT, department="Sales", created_by="mover")
    mover = make_user(id="mover", department="HR")

    assert services.can_view_tool(tool, mover) is False
    assert can_view_credentials(tool, mover) is True


def test_card_masks_password_by_default():
    tool = make_tool(access_level=AccessLevel.PUBLIC, credentials=SECRET)
    card = build_card(tool, make_user())

    assert card.has_credentials is True
    assert card.credentials.username == "svc"
    assert card.credentials.password == MASKED_PASSWORD
    assert card.credentials.password_masked is True
    assert card.credentials.notes == "Use VPN"


def test_card_reveals_password_on_request():
    tool = make_tool(access_level=AccessLevel.PUBLIC, credentials=SECRET)
    card = build_card(tool, make_user(), reveal_passwords=True)

    assert card.credentials.password == "hunter2"
    assert card.credentials.password_masked is False


def test_card_without_password_is_not_masked():
    tool = make_tool(access_level=AccessLevel.PUBLIC, credentials=ToolCredentials(notes="ask IT"))
    card = build_card(tool, make_user())

    assert card.credentials.password is None
    assert card.credentials.password_masked is False


def test_card_hides_credentials_when_gate_rejects():
    tool = make_tool(access_level=AccessLevel.PRIVATE, created_by="owner", credentials=SECRET)
    card = build_card(tool, make_user(id="intruder"))

    assert card.has_credentials is False
    assert card.credentials is None


def test_empty_credentials_bundle_is_not_shown():
    tool = make_tool(access_level=AccessLevel.PUBLIC, credentials=ToolCredentials())
    card = build_card(tool, make_user())

    assert card.has_credentials is False
    assert card.credentials is None


def test_normalize_credentials():
    assert normalize_credentials(None) is None
    assert normalize_credentials(CredentialsInput(username="", password="", notes="")) is None
    creds = normalize_credentials(CredentialsInput(username="  bob ", password="", notes="n"))
    assert creds == ToolCredentials(username="bob", password=None, notes="n")


@pytest.mark.asyncio
async def test_get_tool_credentials(state):
    admin, sales = state.find_user("u1"), state.find_user("u2")

    creds = get_tool_credentials(state, "t1", admin)
    assert creds.password == "secure_password_123"

    # t1 is an Engineering tool: hidden from Sales, reported as missing
    with pytest.raises(ToolNotFoundException):
        get_tool_credentials(state, "t1", sales)

    # t3 is listed for Sales but stores nothing
    with pytest.raises(ToolNotFoundException):
        get_tool_credentials(state, "t3", sales)

    with pytest.raises(ToolNotFoundException):
        get_tool_credentials(state, "nope", admin)


@pytest.mark.asyncio
async def test_get_tool_credentials_gate_checked_separately(state, monkeypatch):
    monkeypatch.setattr(services, "can_view_tool", lambda tool, user: True)
    executive = state.find_user("u3")

    with pytest.raises(CredentialsHiddenException):
        get_tool_credentials(state, "t4", executive)
