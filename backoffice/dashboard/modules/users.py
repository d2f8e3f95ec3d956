"""User and role management."""

from backoffice.application.schemas import UserCreate
from backoffice.reporting.layouts import USER_EXPORT
from backoffice.reporting.layouts.users import UserRow

from ..table import Column
from .base import ModuleDefinition


def user_search_fields(row: UserRow):
    return (row.fullname, row.email, row.role)


USERS = ModuleDefinition(
    name="users",
    export=USER_EXPORT,
    columns=(
        Column("fullname", "Name", hideable=False),
        Column("email", "Email"),
        Column("role", "Role"),
        Column("is_active", "Active"),
    ),
    search_fields=user_search_fields,
    create_schema=UserCreate,
)
