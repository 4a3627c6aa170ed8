"""
Dependency wiring: ports -> Beanie adapters -> services.

Routers only ask for services. Swapping the store means changing the adapter
factories here.
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends

from app.adapters.beanie_counter_adapter import (
    BeanieReferenceCounterAdapter,
    BeanieVisitorCounterAdapter,
)
from app.adapters.beanie_job_adapter import BeanieJobAdapter
from app.adapters.beanie_user_adapter import BeanieUserAdapter
from app.config import settings
from app.core.security import pwd_context
from app.ports.counter_port import ReferenceCounterPort, VisitorCounterPort
from app.ports.job_port import JobPort
from app.ports.user_port import UserPort
from app.services.auth_service import AuthService
from app.services.job_service import JobService
from app.services.reference_service import ReferenceService
from app.services.visitor_service import VisitorService


@lru_cache(maxsize=1)
def get_job_repository() -> JobPort:
    return BeanieJobAdapter()


@lru_cache(maxsize=1)
def get_user_repository() -> UserPort:
    return BeanieUserAdapter()


@lru_cache(maxsize=1)
def get_reference_counter() -> ReferenceCounterPort:
    return BeanieReferenceCounterAdapter()


@lru_cache(maxsize=1)
def get_visitor_counter() -> VisitorCounterPort:
    return BeanieVisitorCounterAdapter()


def get_job_service(jobs: JobPort = Depends(get_job_repository)) -> JobService:
    return JobService(jobs=jobs)


def get_auth_service(users: UserPort = Depends(get_user_repository)) -> AuthService:
    return AuthService(users=users, pwd_context=pwd_context)


def get_reference_service(
    counter: ReferenceCounterPort = Depends(get_reference_counter),
) -> ReferenceService:
    return ReferenceService(counter=counter)


def get_visitor_service(
    counter: VisitorCounterPort = Depends(get_visitor_counter),
) -> VisitorService:
    return VisitorService(
        counter=counter,
        start_count=settings.VISITOR_COUNT_START,
        interval=timedelta(seconds=settings.VISITOR_INCREMENT_INTERVAL_SECONDS),
    )
