"""
Tool schemas.

Input validation and output serialization for directory routes.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from nexushub.apps.tools.models import AccessLevel
from nexushub.core.constants import CATEGORIES

MASKED_PASSWORD = "••••••••"


# ── Request Schemas ───────────────────────────────────────────────────────────

class CredentialsInput(BaseModel):
    """Optional shared login typed into the form."""
    username: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=1000)


class ToolCreate(BaseModel):
    """Register a tool. The acting user becomes its creator."""
    name: str = Field(..., min_length=1, max_length=200)
    url: str = Field(..., min_length=1, max_length=2000)
    description: str = Field(default="", max_length=1000)
    category: str = Field(default=CATEGORIES[0], max_length=100)
    access_level: AccessLevel = AccessLevel.PRIVATE
    credentials: Optional[CredentialsInput] = None
    tags: Union[List[str], str] = Field(
        default_factory=list,
        description="List of tags, or a comma-separated string",
    )

    @field_validator("tags")
    @classmethod
    def split_tags(cls, v: Union[List[str], str]) -> List[str]:
        """'Code, IDE,, Cloud ' -> ['Code', 'IDE', 'Cloud']"""
        parts = v.split(",") if isinstance(v, str) else v
        return [t.strip() for t in parts if t and t.strip()]


class SuggestionRequest(BaseModel):
    """Name and/or URL of the tool being registered."""
    name: str = Field(default="", max_length=200)
    url: str = Field(default="", max_length=2000)

    @model_validator(mode="after")
    def require_name_or_url(self) -> "SuggestionRequest":
        if not self.name.strip() and not self.url.strip():
            raise ValueError("Provide a tool name or URL to analyze")
        return self


class ToolSuggestion(BaseModel):
    """Structured output expected from the suggestion model."""
    category: str = Field(description="One suitable category for the tool")
    description: str = Field(description="Brief professional description, max 15 words")
    tags: List[str] = Field(description="3-4 relevant short tags")


# ── Response Schemas ──────────────────────────────────────────────────────────

class CredentialsView(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    notes: Optional[str] = None
    password_masked: bool = False


class ToolCard(BaseModel):
    """A tool as rendered for one viewer."""
    id: str
    name: str
    url: str
    description: str
    category: str
    icon_url: Optional[str] = None
    access_level: Union[AccessLevel, str]
    department: Optional[str] = None
    created_by: str
    tags: List[str]
    has_credentials: bool = Field(
        ..., description="Tool stores credentials AND the viewer may see them"
    )
    credentials: Optional[CredentialsView] = None


class ToolListResponse(BaseModel):
    tools: List[ToolCard] = Field(default_factory=list)
    count: int
    query: str
    category: str
