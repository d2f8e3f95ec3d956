"""Region reference data: provinces, regencies and districts keyed by code."""

from dataclasses import dataclass


@dataclass
class Province:
    code: str
    name: str

    @property
    def id(self) -> str:
        return self.code


@dataclass
class Regency:
    code: str
    name: str
    province_code: str

    @property
    def id(self) -> str:
        return self.code


@dataclass
class District:
    code: str
    name: str
    regency_code: str

    @property
    def id(self) -> str:
        return self.code
