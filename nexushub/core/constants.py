"""
Seed dataset and static lists.

Used whenever a snapshot key is missing from storage.
"""

from nexushub.apps.tools.models import AccessLevel, Tool, ToolCredentials
from nexushub.apps.users.models import User

ALL_CATEGORIES = "All"

CATEGORIES = [
    "Development",
    "Design",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Productivity",
    "AI & ML",
    "Other",
]

DEFAULT_DEPARTMENTS = [
    "Engineering",
    "Sales",
    "HR",
    "Marketing",
    "Operations",
    "Executive",
]

AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def seed_users() -> list[User]:
    return [
        User(
            id="u1",
            name="Alex Chen",
            email="alex.c@nexushub.com",
            avatar="https://picsum.photos/100/100",
            department="Engineering",
            is_admin=True,
        ),
        User(
            id="u2",
            name="Sarah Jones",
            email="sarah.j@nexushub.com",
            avatar="https://picsum.photos/101/101",
            department="Sales",
            is_admin=False,
        ),
        User(
            id="u3",
            name="Michael Scott",
            email="m.scott@nexushub.com",
            avatar="https://picsum.photos/102/102",
            department="Executive",
            is_admin=False,
        ),
    ]


def seed_tools() -> list[Tool]:
    return [
        Tool(
            id="t1",
            name="Replit",
            url="https://replit.com",
            description="Collaborative browser-based IDE",
            category="Development",
            access_level=AccessLevel.DEPARTMENT,
            department="Engineering",
            created_by="u1",
            tags=["Code", "IDE", "Cloud"],
            credentials=ToolCredentials(username="dev_team_main", password="secure_password_123"),
        ),
        Tool(
            id="t2",
            name="Google AI Studio",
            url="https://aistudio.google.com",
            description="Prototyping with Gemini models",
            category="AI & ML",
            access_level=AccessLevel.PUBLIC,
            created_by="u1",
            tags=["AI", "Gemini", "Google"],
        ),
        Tool(
            id="t3",
            name="Salesforce CRM",
            url="https://salesforce.com",
            description="Customer relationship management platform",
            category="Sales",
            access_level=AccessLevel.DEPARTMENT,
            department="Sales",
            created_by="u2",
            tags=["CRM", "Leads"],
        ),
        Tool(
            id="t4",
            name="Q3 Financial Sheet",
            url="https://docs.google.com/spreadsheets",
            description="Q3 Budgeting and Forecast",
            category="Finance",
            access_level=AccessLevel.PRIVATE,
            created_by="u1",
            tags=["Sheets", "Finance"],
            credentials=ToolCredentials(notes="Only editable by Alex"),
        ),
    ]


def seed_departments() -> list[str]:
    return list(DEFAULT_DEPARTMENTS)
