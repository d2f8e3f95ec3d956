"""Business-code and document-number generation.

Every generator takes the most recent number already issued (or ``None``)
and returns the next one, so the repository only needs a "last code" query.
"""

from datetime import date

from backoffice.domain.entities import ShipmentDetail, ShipmentType

SUPPLIER_PREFIX = "SU"
CUSTOMER_PREFIX = "CU"
MATERIAL_IN_PREFIX = "MI"

_CODE_DIGITS = 5
_SEQUENCE_DIGITS = 4


def next_party_code(prefix: str, last_code: str | None) -> str:
    """``SU-00001`` style codes; the sequence is whatever follows the last dash."""
    sequence = 1
    if last_code:
        tail = last_code.rsplit("-", 1)[-1]
        if tail.isdigit():
            sequence = int(tail) + 1
    return f"{prefix}-{sequence:0{_CODE_DIGITS}d}"


def transaction_prefix(prefix: str, on: date) -> str:
    return f"{prefix}-{on:%Y%m}-"


def next_transaction_no(prefix: str, last_no: str | None, on: date) -> str:
    """``MI-202410-0001``; the sequence restarts every month."""
    period_prefix = transaction_prefix(prefix, on)
    sequence = 1
    if last_no and last_no.startswith(period_prefix):
        tail = last_no[len(period_prefix):]
        if tail.isdigit():
            sequence = int(tail) + 1
    return f"{period_prefix}{sequence:0{_SEQUENCE_DIGITS}d}"


def survey_prefix(
    shipment_type: ShipmentType, shipment_detail: ShipmentDetail, on: date
) -> str:
    """``SD-S202410``: D/I for the shipment type, then S (sea), D (domestic) or A (air)."""
    shipment_code = "D" if shipment_type == ShipmentType.DOMESTIC else "I"
    if shipment_detail == ShipmentDetail.SEA:
        detail_code = "S"
    elif shipment_detail == ShipmentDetail.DOM:
        detail_code = "D"
    else:
        detail_code = "A"
    return f"S{shipment_code}-{detail_code}{on:%Y%m}"


def next_survey_no(
    shipment_type: ShipmentType,
    shipment_detail: ShipmentDetail,
    last_no: str | None,
    on: date,
) -> str:
    prefix = survey_prefix(shipment_type, shipment_detail, on)
    sequence = 1
    if last_no and last_no.startswith(prefix):
        tail = last_no[-_SEQUENCE_DIGITS:]
        if tail.isdigit():
            sequence = int(tail) + 1
    return f"{prefix}{sequence:0{_SEQUENCE_DIGITS}d}"
