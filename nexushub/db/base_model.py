"""
Base model for persisted entities.

Entities live in memory and are persisted as JSON snapshots.
Snapshot field names are camelCase (`isAdmin`, `accessLevel`, `createdBy`);
attribute names stay snake_case.
"""

from typing import Any, Dict, List, TypeVar

from pydantic import BaseModel as PydanticModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T", bound="BaseModel")


class BaseModel(PydanticModel):
    """
    Abstract base for User and Tool records.

    - Accepts both camelCase (snapshot) and snake_case (code) on input
    - `to_snapshot()` always writes camelCase and drops unset optionals
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_snapshot(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_snapshot(cls: type[T], raw: Dict[str, Any]) -> T:
        return cls.model_validate(raw)

    @classmethod
    def many_from_snapshot(cls: type[T], raw: List[Dict[str, Any]]) -> List[T]:
        return [cls.from_snapshot(item) for item in raw]
