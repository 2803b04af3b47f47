"""
Directory business logic.

Two independent gates decide what a viewer gets:
- `can_view_tool`: is the tool listed at all
- `can_view_credentials`: are its stored credentials rendered

Both must be checked. A PRIVATE tool listed to an admin still shows
credentials only because the viewer is admin, never because it was listed.
"""

from typing import Iterable, List, Optional

from nexushub.apps.tools.models import AccessLevel, Tool, ToolCredentials
from nexushub.apps.tools.schemas import (
    MASKED_PASSWORD,
    CredentialsInput,
    CredentialsView,
    SuggestionRequest,
    ToolCard,
    ToolCreate,
    ToolListResponse,
    ToolSuggestion,
)
from nexushub.apps.users.models import User
from nexushub.core.constants import ALL_CATEGORIES
from nexushub.core.llm import ToolAnalyzer
from nexushub.core.state import AppState
from nexushub.utils.exceptions import CredentialsHiddenException, ToolNotFoundException
from nexushub.utils.logger import get_logger
from nexushub.utils.metrics import tool_created_count, tool_listing_count

logger = get_logger(__name__)


# ── Predicates ────────────────────────────────────────────────────────────────

def can_view_tool(tool: Tool, user: User) -> bool:
    """
    Access predicate.

    PUBLIC: everyone. DEPARTMENT: exact department match.
    PRIVATE: creator only. Admins see everything.
    Any other access level is hidden from non-admins.
    """
    has_access = False
    if tool.access_level == AccessLevel.PUBLIC:
        has_access = True
    elif tool.access_level == AccessLevel.DEPARTMENT and tool.department == user.department:
        has_access = True
    elif tool.access_level == AccessLevel.PRIVATE and tool.created_by == user.id:
        has_access = True

    if user.is_admin:
        has_access = True

    return has_access


def can_view_credentials(tool: Tool, user: User) -> bool:
    """Credential gate. Evaluated independently of `can_view_tool`."""
    return (
        user.is_admin
        or tool.created_by == user.id
        or (tool.access_level == AccessLevel.DEPARTMENT and tool.department == user.department)
        or tool.access_level == AccessLevel.PUBLIC
    )


def matches_search(tool: Tool, query: str) -> bool:
    """Case-insensitive substring on name, description or any tag."""
    needle = query.lower()
    if not needle:
        return True
    return (
        needle in tool.name.lower()
        or needle in tool.description.lower()
        or any(needle in tag.lower() for tag in tool.tags)
    )


def matches_category(tool: Tool, category: str) -> bool:
    return category == ALL_CATEGORIES or tool.category == category


def filter_tools(
    tools: Iterable[Tool],
    user: User,
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> List[Tool]:
    """Stable filter: survivors keep their input order."""
    return [
        tool for tool in tools
        if can_view_tool(tool, user)
        and matches_search(tool, query)
        and matches_category(tool, category)
    ]


# ── Helpers ───────────────────────────────────────────────────────────────────

def normalize_credentials(data: Optional[CredentialsInput]) -> Optional[ToolCredentials]:
    """Blank fields become None; an all-blank bundle is dropped."""
    if data is None:
        return None
    creds = ToolCredentials(
        username=(data.username or "").strip() or None,
        password=data.password or None,
        notes=(data.notes or "").strip() or None,
    )
    return None if creds.is_empty() else creds


def build_card(tool: Tool, user: User, reveal_passwords: bool = False) -> ToolCard:
    """Render a tool for `user`, applying the credential gate."""
    show_credentials = tool.has_credentials and can_view_credentials(tool, user)

    credentials = None
    if show_credentials:
        creds = tool.credentials
        masked = bool(creds.password) and not reveal_passwords
        credentials = CredentialsView(
            username=creds.username,
            password=MASKED_PASSWORD if masked else creds.password,
            notes=creds.notes,
            password_masked=masked,
        )

    return ToolCard(
        id=tool.id,
        name=tool.name,
        url=tool.url,
        description=tool.description,
        category=tool.category,
        icon_url=tool.icon_url,
        access_level=tool.access_level,
        department=tool.department,
        created_by=tool.created_by,
        tags=list(tool.tags),
        has_credentials=show_credentials,
        credentials=credentials,
    )


# ── Services ──────────────────────────────────────────────────────────────────

def list_visible_tools(
    state: AppState,
    user: User,
    query: str = "",
    category: str = ALL_CATEGORIES,
    reveal_passwords: bool = False,
) -> ToolListResponse:
    """Directory view for the acting user. Recomputed on every call."""
    visible = filter_tools(state.tools, user, query=query, category=category)

    tool_listing_count.labels(department=user.department).inc()
    logger.debug(
        f"Listing for {user.id} ({user.department}): query='{query[:50]}', "
        f"category={category}, visible={len(visible)}/{len(state.tools)}"
    )

    return ToolListResponse(
        tools=[build_card(t, user, reveal_passwords=reveal_passwords) for t in visible],
        count=len(visible),
        query=query,
        category=category,
    )


def register_tool(state: AppState, data: ToolCreate, user: User) -> Tool:
    """
    Add a tool created by `user`.

    The tool takes the creator's current department whatever its access
    level. It is not updated if the creator later moves department.
    """
    tool = Tool(
        id=state.new_id("t"),
        name=data.name.strip(),
        url=data.url.strip(),
        description=data.description.strip(),
        category=data.category,
        access_level=data.access_level,
        department=user.department,
        created_by=user.id,
        credentials=normalize_credentials(data.credentials),
        tags=data.tags,
    )
    state.add_tool(tool)

    tool_created_count.labels(access_level=tool.access_level.value).inc()
    logger.info(
        f"Registered tool: {tool.id} '{tool.name}' level={tool.access_level.value} "
        f"by {user.id}"
    )
    return tool


def get_tool_credentials(state: AppState, tool_id: str, user: User) -> ToolCredentials:
    """
    Unmasked credentials for copy/reveal actions.

    Raises:
        ToolNotFoundException: unknown tool, tool not listed for `user`,
            or tool without credentials
        CredentialsHiddenException: tool is listed but the gate rejects
    """
    tool = state.find_tool(tool_id)
    if tool is None or not can_view_tool(tool, user):
        raise ToolNotFoundException()

    if not can_view_credentials(tool, user):
        raise CredentialsHiddenException()

    if not tool.has_credentials:
        raise ToolNotFoundException(detail="This tool has no stored credentials.")

    return tool.credentials


async def suggest_tool_details(
    analyzer: ToolAnalyzer,
    data: SuggestionRequest,
) -> Optional[ToolSuggestion]:
    """Never raises: any failure is 'no suggestion'."""
    return await analyzer.analyze(data.name.strip(), data.url.strip())
