"""Cargo surveys."""

from typing import Any

from backoffice.application.schemas import SurveyCreate, SurveyUpdate
from backoffice.domain import calculations
from backoffice.reporting import display, display_cbm, display_date
from backoffice.reporting.layouts import SURVEY_EXPORT
from backoffice.reporting.layouts.surveys import SurveyRow

from ..table import Column
from .base import ModuleDefinition


def survey_search_fields(row: SurveyRow):
    return (row.survey_no, row.origin, row.destination, row.customer_name)


def derive_survey(values: dict[str, Any]) -> None:
    """CBM per line (cm → m³) and the survey total."""
    items = values.get("items") or []
    for line in items:
        line["cbm"] = calculations.cbm(
            line.get("width"), line.get("length"), line.get("height"), line.get("quantity")
        )
    values["total_cbm"] = round(
        sum(line["cbm"] for line in items), calculations.CBM_PRECISION
    )


def _present_survey(entity: dict[str, Any]) -> dict[str, str]:
    row = SurveyRow.model_validate(entity)
    fields = {
        "Survey No": row.survey_no,
        "Survey Date": display_date(row.survey_date),
        "Work Date": display_date(row.work_date),
        "Customer": display(row.customer_name),
        "Origin": row.origin,
        "Destination": row.destination,
        "Cargo Type": display(row.cargo_type),
        "Shipment": f"{row.shipment_type.value} / {row.shipment_detail.value}",
        "Status": display(row.status_survey),
        "Total CBM": display_cbm(row.total_cbm),
    }
    for number, item in enumerate(row.items, start=1):
        fields[f"Item {number}"] = (
            f"{display(item.name)}: {item.width:g}×{item.length:g}×{item.height:g} cm "
            f"× {item.quantity} = {display_cbm(item.cbm)} m³"
        )
    return fields


SURVEYS = ModuleDefinition(
    name="surveys",
    export=SURVEY_EXPORT,
    columns=(
        Column("survey_no", "Survey No", hideable=False),
        Column("survey_date", "Survey Date"),
        Column("customer_name", "Customer"),
        Column("origin", "Origin"),
        Column("destination", "Destination"),
        Column("cargo_type", "Cargo"),
        Column("status_survey", "Status"),
        Column("total_cbm", "CBM"),
    ),
    search_fields=survey_search_fields,
    create_schema=SurveyCreate,
    update_schema=SurveyUpdate,
    immutable_fields=("survey_no", "status_survey"),
    derived_fields=("items.*.cbm", "total_cbm"),
    derive=derive_survey,
    presenter=_present_survey,
)
