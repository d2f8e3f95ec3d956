"""Per-module wiring for the generic dashboard components."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from backoffice.config import get_settings
from backoffice.reporting import CsvField, ExportLayout, RowModel, display

from ..client import ApiClient, EntityEndpoint
from ..detail import DetailView, Presenter
from ..form import Derive, EntityForm, FormMode
from ..notifications import Notifier
from ..page import PageController
from ..repository import EntityRepository
from ..search import SearchFields
from ..table import Column, DataTable


@dataclass(frozen=True)
class ModuleDefinition:
    """Everything that differs between two list/form/detail screens."""

    name: str
    export: ExportLayout
    columns: tuple[Column, ...]
    search_fields: SearchFields
    create_schema: type[BaseModel] | None = None
    update_schema: type[BaseModel] | None = None
    immutable_fields: tuple[str, ...] = ()
    derived_fields: tuple[str, ...] = ()
    derive: Derive | None = None
    presenter: Presenter | None = None
    page_size: int = 10

    @property
    def row_model(self) -> type[RowModel]:
        return self.export.row_model

    @property
    def csv_fields(self) -> tuple[CsvField, ...]:
        return self.export.fields

    @property
    def export_prefix(self) -> str:
        return self.export.prefix

    def repository(self, client: ApiClient) -> EntityRepository:
        return EntityRepository(EntityEndpoint(client, self.name))

    def build_table(self) -> DataTable:
        return DataTable(
            self.columns,
            search_fields=self.search_fields,
            page_size=self.page_size,
            can_add=self.create_schema is not None,
        )

    def build_page(
        self,
        repository: EntityRepository,
        notifier: Notifier,
        *,
        confirm: Callable[[str], bool] | None = None,
    ) -> PageController:
        return PageController(
            repository,
            self.build_table(),
            self.row_model,
            notifier,
            page_size=self.page_size,
            max_limit=get_settings().max_page_size,
            confirm=confirm,
            csv_fields=self.csv_fields,
            export_prefix=self.export_prefix,
        )

    def build_form(
        self,
        repository: EntityRepository,
        notifier: Notifier,
        *,
        entity_id: str | None = None,
        defaults: dict[str, Any] | None = None,
        confirm: Callable[[str], bool] | None = None,
        on_success: Callable[[dict[str, Any] | None], None] | None = None,
    ) -> EntityForm:
        if self.create_schema is None:
            raise ValueError(f"{self.name} has no form")
        return EntityForm(
            repository,
            notifier,
            create_schema=self.create_schema,
            update_schema=self.update_schema,
            mode=FormMode.EDIT if entity_id else FormMode.CREATE,
            defaults=defaults,
            entity_id=entity_id,
            immutable_fields=self.immutable_fields,
            derived_fields=self.derived_fields,
            derive=self.derive,
            confirm=confirm,
            on_success=on_success,
        )

    def build_detail(
        self,
        repository: EntityRepository,
        on_back: Callable[[], None] | None = None,
    ) -> DetailView:
        presenter = self.presenter or (lambda entity: {k: display(v) for k, v in entity.items()})
        return DetailView(repository, presenter, on_back)
