from backoffice.reporting import (
    CsvExport,
    CsvField,
    ExportUnavailableError,
    RowModel,
    export_to_csv,
    primary_of,
    validate_rows,
)

from .client import ApiClient, EntityEndpoint, MutationResult, RemotePage
from .detail import DetailState, DetailView
from .form import EntityForm, FieldLockedError, FormMode, FormState
from .notifications import Notification, NotificationLevel, Notifier
from .page import ListFilter, PageController
from .repository import EntityRepository
from .search import matches
from .table import Column, DataTable, EmptyState, SortDirection

__all__ = [
    "ApiClient",
    "EntityEndpoint",
    "MutationResult",
    "RemotePage",
    "CsvExport",
    "CsvField",
    "ExportUnavailableError",
    "export_to_csv",
    "DetailState",
    "DetailView",
    "EntityForm",
    "FieldLockedError",
    "FormMode",
    "FormState",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "ListFilter",
    "PageController",
    "EntityRepository",
    "RowModel",
    "primary_of",
    "validate_rows",
    "matches",
    "Column",
    "DataTable",
    "EmptyState",
    "SortDirection",
]
