"""
Tools router.

Entry/exit only, no logic here. Calls tool services.
"""

from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from nexushub.apps.tools.schemas import SuggestionRequest, ToolCreate
from nexushub.apps.tools.services import (
    build_card,
    get_tool_credentials,
    list_visible_tools,
    register_tool,
    suggest_tool_details,
)
from nexushub.apps.users.models import User
from nexushub.config.settings import settings
from nexushub.core.constants import ALL_CATEGORIES, CATEGORIES
from nexushub.core.dependencies import get_current_user, get_state, get_tool_analyzer
from nexushub.core.llm import ToolAnalyzer
from nexushub.core.state import AppState
from nexushub.utils.responses import success_response

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/api/v1/tools", tags=["Tools"])


@router.get("")
async def list_tools(
    q: str = Query(default="", max_length=200, description="Search name, description, tags"),
    category: str = Query(default=ALL_CATEGORIES, description="Category or 'All'"),
    reveal_passwords: bool = Query(default=False),
    user: User = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """
    Tools visible to the acting user, filtered by search text and category.

    Credentials appear only where the credential gate allows;
    passwords are masked unless `reveal_passwords=true`.
    """
    result = list_visible_tools(
        state=state,
        user=user,
        query=q,
        category=category,
        reveal_passwords=reveal_passwords,
    )
    return success_response(
        status_code=200,
        message=f"{result.count} tools",
        data=result.model_dump(),
    )


@router.get("/categories")
async def list_categories():
    return success_response(status_code=200, message="Categories", data=CATEGORIES)


@router.post("", status_code=201)
async def create_tool(
    data: ToolCreate,
    user: User = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """Register a tool owned by the acting user."""
    tool = register_tool(state=state, data=data, user=user)
    return success_response(
        status_code=201,
        message="Tool added successfully",
        data=build_card(tool, user).model_dump(),
    )


@router.post("/suggest")
@limiter.limit(settings.SUGGESTION_RATE_LIMIT)
async def suggest(
    payload: SuggestionRequest,
    # Need to get raw Request object for limiter
    request: Request,
    analyzer: ToolAnalyzer = Depends(get_tool_analyzer),
):
    """
    Auto-fill description, category and tags with AI.

    `data` is null whenever no suggestion could be produced;
    the form stays usable manually.
    """
    suggestion = await suggest_tool_details(analyzer=analyzer, data=payload)
    return success_response(
        status_code=200,
        message="Suggestion ready" if suggestion else "No suggestion available",
        data=suggestion.model_dump() if suggestion else None,
    )


@router.get("/{tool_id}/credentials")
async def tool_credentials(
    tool_id: str,
    user: User = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """Unmasked credentials for copy-to-clipboard."""
    credentials = get_tool_credentials(state=state, tool_id=tool_id, user=user)
    return success_response(
        status_code=200,
        message="Tool credentials",
        data=credentials.model_dump(exclude_none=True),
    )
