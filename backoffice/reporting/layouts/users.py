from backoffice.domain.entities import Role

from ..csv_export import CsvField, ExportLayout
from ..rows import RowModel


class UserRow(RowModel):
    fullname: str
    email: str
    role: Role
    is_active: bool = True


USER_EXPORT = ExportLayout(
    "users",
    UserRow,
    (
        CsvField("Name", lambda r: r.fullname),
        CsvField("Email", lambda r: r.email),
        CsvField("Role", lambda r: r.role),
        CsvField("Active", lambda r: "Yes" if r.is_active else "No"),
    ),
)
