from abc import ABC, abstractmethod
from typing import Any


class JobPort(ABC):
    """Storage operations for job postings.

    Records are plain dicts keyed by their wire names
    (``_id``, ``title``, ``description``, ``location``, ``datePosted``, ``icon``).
    """

    @abstractmethod
    async def create_job(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a new job and return the stored record."""
        ...

    @abstractmethod
    async def list_jobs(self) -> list[dict[str, Any]]:
        """Return every job in store order."""
        ...

    @abstractmethod
    async def update_job(self, job_id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """Merge ``data`` into the job and return the updated record, or None if absent."""
        ...

    @abstractmethod
    async def delete_job(self, job_id: str) -> bool:
        """Remove the job. Returns False when nothing matched."""
        ...
