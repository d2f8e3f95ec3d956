"""Abstract repository interface (port) for Survey persistence."""

from abc import ABC, abstractmethod
from datetime import date, datetime

from backoffice.domain.entities import (
    Page,
    Survey,
    SurveyStatus,
    SurveyStatusHistory,
)


class SurveyRepository(ABC):
    """Port for survey persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, survey_id: str) -> Survey | None:
        """Survey with items and its full status history (newest first)."""
        ...

    @abstractmethod
    async def get_by_ids(self, survey_ids: list[str]) -> list[Survey]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        status: SurveyStatus | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Survey]:
        ...

    @abstractmethod
    async def get_last_survey_no(self, prefix: str) -> str | None:
        ...

    @abstractmethod
    async def get_status_history(self, survey_id: str) -> list[SurveyStatusHistory]:
        ...

    @abstractmethod
    async def count_by_customer(self, customer_id: str) -> int:
        ...

    @abstractmethod
    async def count(
        self,
        *,
        status: SurveyStatus | None = None,
        created_since: datetime | None = None,
    ) -> int:
        """Count surveys, optionally by status and creation time (for stats)."""
        ...

    @abstractmethod
    async def create(self, survey: Survey) -> Survey:
        ...

    @abstractmethod
    async def update(self, survey: Survey) -> Survey:
        """Persist root fields, replace items and append new status history rows."""
        ...

    @abstractmethod
    async def delete(self, survey_id: str) -> bool:
        ...
