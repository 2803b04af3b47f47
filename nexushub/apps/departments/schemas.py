"""
Department schemas.
"""

from pydantic import BaseModel, Field, field_validator


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Department name must not be blank")
        return v


class DepartmentResponse(BaseModel):
    name: str
    user_count: int = Field(..., description="Users currently assigned")
