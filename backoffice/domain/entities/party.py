"""Address and contact sub-records shared by suppliers and customers."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class StatusActive(str, Enum):
    ACTIVE = "ACTIVE"
    NOACTIVE = "NOACTIVE"
    SUSPENDED = "SUSPENDED"


class AddressType(str, Enum):
    BILLING = "BILLING"
    BRANCH = "BRANCH"
    HEAD_OFFICE = "HEAD_OFFICE"
    SHIPPING = "SHIPPING"
    WAREHOUSE = "WAREHOUSE"


class ContactType(str, Enum):
    BILLING = "BILLING"
    EMERGENCY = "EMERGENCY"
    PRIMARY = "PRIMARY"
    SHIPPING = "SHIPPING"
    TECHNICAL = "TECHNICAL"


@dataclass
class Address:
    address_type: AddressType
    address_line1: str
    country_code: str
    is_primary: bool = False
    address_line2: str | None = None
    zipcode: str | None = None
    province_code: str | None = None
    regency_code: str | None = None
    district_code: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Contact:
    contact_type: ContactType
    name: str
    phone_number: str
    is_primary: bool = False
    email: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
