from fastapi import HTTPException, status
from typing import Any, Dict

class AppException(HTTPException):
    """HTTP error rendered as a flat ``{"error": message}`` body."""
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)

def create_error_response(message: str) -> Dict[str, Any]:
    """Error body shared by every failing endpoint."""
    return {"error": message}

class BadRequestException(AppException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

class NotFoundException(AppException):
    def __init__(self, resource: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")

class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# Domain errors raised by services, translated to HTTP errors in the routers

class DomainError(Exception):
    """Base class for service-level failures."""

class ReferenceGenerationError(DomainError):
    def __init__(self, message: str = "Could not generate reference number"):
        super().__init__(message)

class JobNotFoundError(DomainError):
    def __init__(self, job_id: str):
        super().__init__(f"Job {job_id} not found")
        self.job_id = job_id

class UsernameTakenError(DomainError):
    def __init__(self, username: str):
        super().__init__(f"Username {username!r} is already registered")
        self.username = username

class InvalidCredentialsError(DomainError):
    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
