"""
Tool records.

A tool's `department` is copied from its creator at registration time
and never re-validated afterwards.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from nexushub.db.base_model import BaseModel


class AccessLevel(str, Enum):
    """Default visibility of a tool."""
    PRIVATE = "PRIVATE"        # Only the creator
    DEPARTMENT = "DEPARTMENT"  # Everyone in the same department
    PUBLIC = "PUBLIC"          # Everyone in the organization


class ToolCredentials(BaseModel):
    """Shared login for a tool. Stored in plaintext."""
    username: Optional[str] = None
    password: Optional[str] = None
    notes: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.username or self.password or self.notes)


class Tool(BaseModel):
    id: str
    name: str
    url: str
    description: str = ""
    category: str
    icon_url: Optional[str] = None
    # Stored levels outside AccessLevel load as plain strings and are
    # listed to admins only.
    access_level: Union[AccessLevel, str] = Field(union_mode="left_to_right")
    department: Optional[str] = None
    created_by: str
    credentials: Optional[ToolCredentials] = None
    tags: List[str] = Field(default_factory=list)

    @property
    def has_credentials(self) -> bool:
        return self.credentials is not None and not self.credentials.is_empty()

