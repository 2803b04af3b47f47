"""
User record.

The department is a plain string and may dangle after the department
is deleted. Email is not unique.
"""

from nexushub.db.base_model import BaseModel


class User(BaseModel):
    id: str
    name: str
    email: str
    avatar: str
    department: str
    is_admin: bool = False
