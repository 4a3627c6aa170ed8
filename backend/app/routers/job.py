from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.job import JobCreate, JobResponse, JobUpdate
from app.services.job_service import JobService
from app.utils.dependencies import get_job_service
from app.utils.exceptions import InternalServerException, JobNotFoundError, NotFoundException
from app.utils.logger import app_logger

router = APIRouter(prefix="/api/jobs", tags=["jobs"])

@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="create_job",
    summary="Create a job posting",
    description="Stores the posting as sent. `datePosted` defaults to the creation time.",
    responses={500: {"model": ErrorResponse}},
)
async def create_job(data: JobCreate, service: JobService = Depends(get_job_service)):
    try:
        return await service.create_job(data.model_dump(by_alias=True, exclude_none=True))
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"Job creation failed: {str(e)}")
        raise InternalServerException("Error saving job")

@router.get(
    "",
    response_model=List[JobResponse],
    operation_id="list_jobs",
    summary="List all job postings",
    responses={500: {"model": ErrorResponse}},
)
async def list_jobs(service: JobService = Depends(get_job_service)):
    try:
        jobs = await service.list_jobs()
        app_logger.info(f"Jobs listed: {len(jobs)}")
        return jobs
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"Job listing failed: {str(e)}")
        raise InternalServerException("Error fetching jobs")

@router.put(
    "/{job_id}",
    response_model=JobResponse,
    operation_id="update_job",
    summary="Update a job posting",
    description="""
    Merges the supplied fields into the posting and returns the updated posting.\n
    - Fields left out of the body are not touched.\n
    - Unknown or malformed ids return 404.
    """,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def update_job(job_id: str, data: JobUpdate, service: JobService = Depends(get_job_service)):
    changes = data.model_dump(by_alias=True, exclude_unset=True)
    # datePosted is required on stored jobs
    if changes.get("datePosted") is None:
        changes.pop("datePosted", None)
    try:
        return await service.update_job(job_id, changes)
    except HTTPException:
        raise
    except JobNotFoundError:
        raise NotFoundException("Job")
    except Exception as e:
        app_logger.error(f"Job update failed: job_id={job_id}, error: {str(e)}")
        raise InternalServerException("Error updating job")

@router.delete(
    "/{job_id}",
    response_model=MessageResponse,
    operation_id="delete_job",
    summary="Delete a job posting",
    description="Removes the posting. Deleting an id that does not exist is not an error.",
    responses={500: {"model": ErrorResponse}},
)
async def delete_job(job_id: str, service: JobService = Depends(get_job_service)):
    try:
        await service.delete_job(job_id)
        return MessageResponse(message="Job deleted")
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"Job deletion failed: job_id={job_id}, error: {str(e)}")
        raise InternalServerException("Error deleting job")
