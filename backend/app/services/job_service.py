"""
Job service: create, list, update and delete job postings.
No business rules; the store holds whatever the client sends.
"""

from typing import Any

from app.ports.job_port import JobPort
from app.utils.exceptions import JobNotFoundError
from app.utils.logger import job_logger


class JobService:

    def __init__(self, jobs: JobPort) -> None:
        self._jobs = jobs

    async def create_job(self, data: dict[str, Any]) -> dict[str, Any]:
        job = await self._jobs.create_job(data)
        job_logger.info(f"Job created: id={job['_id']}")
        return job

    async def list_jobs(self) -> list[dict[str, Any]]:
        return await self._jobs.list_jobs()

    async def update_job(self, job_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Apply only the supplied fields. Raises JobNotFoundError for unknown ids."""
        job = await self._jobs.update_job(job_id, data)
        if job is None:
            raise JobNotFoundError(job_id)
        job_logger.info(f"Job updated: id={job_id}, fields={sorted(data)}")
        return job

    async def delete_job(self, job_id: str) -> bool:
        deleted = await self._jobs.delete_job(job_id)
        if deleted:
            job_logger.info(f"Job deleted: id={job_id}")
        else:
            job_logger.warning(f"Delete requested for unknown job: id={job_id}")
        return deleted
