from .common import MessageResponse, ErrorResponse
from .job import JobCreate, JobUpdate, JobResponse
from .user import UserCredentials, UserPublic, LoginResponse
from .counter import ReferenceNumberResponse, VisitorCountResponse
