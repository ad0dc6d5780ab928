"""Request-scoped wiring: settings, repositories, services and the auth guards.

Guards are ordered through FastAPI's dependency graph: ``require_admin``
depends on ``get_current_email``, so authentication always resolves first.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param
from sqlmodel import Session

from .config import Settings
from .database import get_session
from .utils import decode_jwt_token
from .application.ports.user_repo import UserRepository
from .application.services.auth_service import AuthService
from .application.services.availability_service import AvailabilityService
from .application.services.booking_service import BookingService
from .application.services.doctor_service import DoctorService
from .application.services.payment_service import PaymentService
from .application.services.user_service import UserService
from .infrastructure.persistence.sqlalchemy.repositories.bookings_repository_sql import SqlBookingsRepository
from .infrastructure.persistence.sqlalchemy.repositories.doctors_repository_sql import SqlDoctorsRepository
from .infrastructure.persistence.sqlalchemy.repositories.options_repository_sql import SqlAppointmentOptionsRepository
from .infrastructure.persistence.sqlalchemy.repositories.payments_repository_sql import SqlPaymentsRepository
from .infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository

logger = logging.getLogger(__name__)

# Declares the bearer scheme in OpenAPI; the header itself is parsed in get_current_email
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_repo(session: Session = Depends(get_session)) -> UserRepository:
    return SqlUserRepository(session)


# ------------------------
# Guards
# ------------------------
def get_current_email(
    request: Request,
    _credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> str:
    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Unauthorized Access")

    payload = decode_jwt_token(token, settings) if token else None
    email = payload.get("email") if payload else None
    if not email:
        logger.warning(f"Rejected bearer token on {request.url.path}")
        raise HTTPException(status_code=403, detail="forbidden access")

    request.state.email = email
    return email


def require_admin(
    email: str = Depends(get_current_email),
    user_repo: UserRepository = Depends(get_user_repo),
) -> str:
    user = user_repo.get_by_email(email)
    if not user or not user.is_admin:
        logger.warning(f"Identity {email} is not an admin")
        raise HTTPException(status_code=403, detail="Forbidden Access")
    return email


# ------------------------
# Services
# ------------------------
def get_availability_service(session: Session = Depends(get_session)) -> AvailabilityService:
    return AvailabilityService(
        options_repo=SqlAppointmentOptionsRepository(session),
        bookings_repo=SqlBookingsRepository(session),
    )


def get_booking_service(session: Session = Depends(get_session)) -> BookingService:
    return BookingService(repo=SqlBookingsRepository(session))


def get_user_service(user_repo: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(user_repo=user_repo)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(user_repo=user_repo, settings=settings)


def get_doctor_service(session: Session = Depends(get_session)) -> DoctorService:
    return DoctorService(repo=SqlDoctorsRepository(session))


def get_payment_service(
    request: Request,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> PaymentService:
    return PaymentService(
        payments_repo=SqlPaymentsRepository(session),
        bookings_repo=SqlBookingsRepository(session),
        gateway=getattr(request.app.state, "payment_gateway", None),
        currency=settings.PAYMENT_CURRENCY,
    )
