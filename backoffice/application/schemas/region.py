"""Pydantic DTOs for province / regency / district reference data."""

from pydantic import BaseModel, Field

_REGION_CODE = r"^[0-9.]+$"


class ProvinceCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=13, pattern=_REGION_CODE, examples=["32"])
    name: str = Field(..., min_length=1, max_length=100, examples=["JAWA BARAT"])


class ProvinceUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    model_config = {"extra": "forbid"}


class ProvinceResponse(BaseModel):
    id: str
    code: str
    name: str

    model_config = {"from_attributes": True}


class RegencyCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=13, pattern=_REGION_CODE, examples=["32.73"])
    name: str = Field(..., min_length=1, max_length=100)
    province_code: str = Field(..., min_length=1, max_length=13, pattern=_REGION_CODE)


class RegencyUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    province_code: str | None = Field(None, min_length=1, max_length=13, pattern=_REGION_CODE)

    model_config = {"extra": "forbid"}


class RegencyResponse(BaseModel):
    id: str
    code: str
    name: str
    province_code: str

    model_config = {"from_attributes": True}


class DistrictCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=13, pattern=_REGION_CODE, examples=["32.73.01"])
    name: str = Field(..., min_length=1, max_length=100)
    regency_code: str = Field(..., min_length=1, max_length=13, pattern=_REGION_CODE)


class DistrictUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    regency_code: str | None = Field(None, min_length=1, max_length=13, pattern=_REGION_CODE)

    model_config = {"extra": "forbid"}


class DistrictResponse(BaseModel):
    id: str
    code: str
    name: str
    regency_code: str

    model_config = {"from_attributes": True}
