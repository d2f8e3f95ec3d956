"""Abstract repository interface (port) for province/regency/district reference data."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import District, Page, Province, Regency


class RegionRepository(ABC):
    """Port for the three region tables; every row is keyed by its code."""

    # ── Provinces ────────────────────────────────────────────────────

    @abstractmethod
    async def get_province(self, code: str) -> Province | None:
        ...

    @abstractmethod
    async def get_provinces(self, codes: list[str]) -> list[Province]:
        ...

    @abstractmethod
    async def list_provinces(
        self, *, search: str | None = None, page: int = 1, limit: int = 10
    ) -> Page[Province]:
        ...

    @abstractmethod
    async def save_provinces(self, provinces: list[Province]) -> int:
        """Insert or update provinces by code. Returns the number written."""
        ...

    @abstractmethod
    async def delete_province(self, code: str) -> bool:
        ...

    # ── Regencies ────────────────────────────────────────────────────

    @abstractmethod
    async def get_regency(self, code: str) -> Regency | None:
        ...

    @abstractmethod
    async def get_regencies(self, codes: list[str]) -> list[Regency]:
        ...

    @abstractmethod
    async def list_regencies(
        self,
        *,
        search: str | None = None,
        province_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Regency]:
        ...

    @abstractmethod
    async def save_regencies(self, regencies: list[Regency]) -> int:
        ...

    @abstractmethod
    async def delete_regency(self, code: str) -> bool:
        ...

    @abstractmethod
    async def count_regencies(self, province_code: str) -> int:
        ...

    # ── Districts ────────────────────────────────────────────────────

    @abstractmethod
    async def get_district(self, code: str) -> District | None:
        ...

    @abstractmethod
    async def get_districts(self, codes: list[str]) -> list[District]:
        ...

    @abstractmethod
    async def list_districts(
        self,
        *,
        search: str | None = None,
        regency_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[District]:
        ...

    @abstractmethod
    async def save_districts(self, districts: list[District]) -> int:
        ...

    @abstractmethod
    async def delete_district(self, code: str) -> bool:
        ...

    @abstractmethod
    async def count_districts(self, regency_code: str) -> int:
        ...
