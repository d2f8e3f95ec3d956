"""Survey rows and their measured items."""

from pydantic import BaseModel, ConfigDict

from backoffice.domain.entities import CargoType, ShipmentDetail, ShipmentType, SurveyStatus

from ..csv_export import CsvField, ExportLayout
from ..rows import Amount, Count, LenientDate, RowModel, display_cbm


class SurveyItemRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    width: Amount = 0.0
    length: Amount = 0.0
    height: Amount = 0.0
    quantity: Count = 0
    cbm: Amount = 0.0


class SurveyRow(RowModel):
    survey_no: str
    survey_date: LenientDate = None
    work_date: LenientDate = None
    customer_id: str
    customer_name: str | None = None
    origin: str
    destination: str
    cargo_type: CargoType
    shipment_type: ShipmentType
    shipment_detail: ShipmentDetail
    status_survey: SurveyStatus
    total_cbm: Amount = 0.0
    items: list[SurveyItemRow] = []


SURVEY_EXPORT = ExportLayout(
    "surveys",
    SurveyRow,
    (
        CsvField("Survey No", lambda r: r.survey_no),
        CsvField("Survey Date", lambda r: r.survey_date),
        CsvField("Work Date", lambda r: r.work_date),
        CsvField("Customer", lambda r: r.customer_name),
        CsvField("Origin", lambda r: r.origin),
        CsvField("Destination", lambda r: r.destination),
        CsvField("Cargo Type", lambda r: r.cargo_type),
        CsvField("Shipment Type", lambda r: r.shipment_type),
        CsvField("Shipment Detail", lambda r: r.shipment_detail),
        CsvField("Status", lambda r: r.status_survey),
        CsvField("Total CBM", lambda r: display_cbm(r.total_cbm)),
    ),
)
