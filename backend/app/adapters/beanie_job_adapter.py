"""
Beanie/Motor implementation of JobPort.
"""

from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument

from app.models.job import Job
from app.ports.job_port import JobPort
from app.utils.clock import as_utc


def _to_record(job: Job) -> dict[str, Any]:
    return {
        "_id": str(job.id),
        "title": job.title,
        "description": job.description,
        "location": job.location,
        "datePosted": as_utc(job.date_posted),
        "icon": job.icon,
    }


def _object_id(job_id: str) -> ObjectId | None:
    # Malformed ids can never match a stored job
    if not ObjectId.is_valid(job_id):
        return None
    return ObjectId(job_id)


class BeanieJobAdapter(JobPort):
    """Jobs stored in the ``jobs`` collection."""

    async def create_job(self, data: dict[str, Any]) -> dict[str, Any]:
        job = Job(**data)
        await job.insert()
        return _to_record(job)

    async def list_jobs(self) -> list[dict[str, Any]]:
        jobs = await Job.find_all().to_list()
        return [_to_record(job) for job in jobs]

    async def update_job(self, job_id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        object_id = _object_id(job_id)
        if object_id is None:
            return None
        if not data:
            job = await Job.get(object_id)
            return _to_record(job) if job else None

        raw = await Job.get_motor_collection().find_one_and_update(
            {"_id": object_id},
            {"$set": data},
            return_document=ReturnDocument.AFTER,
        )
        if raw is None:
            return None
        return _to_record(Job.model_validate(raw))

    async def delete_job(self, job_id: str) -> bool:
        object_id = _object_id(job_id)
        if object_id is None:
            return False
        result = await Job.get_motor_collection().delete_one({"_id": object_id})
        return result.deleted_count > 0
