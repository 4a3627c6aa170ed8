from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.user import LoginResponse, UserCredentials, UserPublic
from app.services.auth_service import AuthService
from app.utils.dependencies import get_auth_service
from app.utils.exceptions import (
    BadRequestException,
    InternalServerException,
    InvalidCredentialsError,
    UsernameTakenError,
)
from app.utils.logger import auth_logger

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="register_user",
    summary="Register a user",
    description="Stores the username with a bcrypt hash of the password. Usernames must be unique.",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register(data: UserCredentials, service: AuthService = Depends(get_auth_service)):
    try:
        await service.register(data.username, data.password)
        return MessageResponse(message="User registered successfully")
    except HTTPException:
        raise
    except UsernameTakenError:
        auth_logger.warning(f"Registration rejected, username taken: {data.username}")
        raise BadRequestException("Error registering user")
    except Exception as e:
        auth_logger.error(f"Registration failed: {str(e)}")
        raise InternalServerException("Error registering user")


@router.post(
    "/login",
    response_model=LoginResponse,
    operation_id="login_user",
    summary="Check user credentials",
    description="""
    Verifies the username and password.\n
    - No token or session is issued; the response only echoes the username.\n
    - Unknown usernames and wrong passwords return the same error.
    """,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def login(data: UserCredentials, service: AuthService = Depends(get_auth_service)):
    try:
        username = await service.login(data.username, data.password)
        return LoginResponse(message="Login successful", user=UserPublic(username=username))
    except HTTPException:
        raise
    except InvalidCredentialsError as e:
        raise BadRequestException(str(e))
    except Exception as e:
        auth_logger.error(f"Login failed: {str(e)}")
        raise InternalServerException("Error logging in")
