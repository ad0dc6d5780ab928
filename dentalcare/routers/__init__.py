# Routers package
from . import appointments_router
from . import auth_router
from . import bookings_router
from . import doctors_router
from . import payments_router
from . import users_router

__all__ = [
    "appointments_router",
    "auth_router",
    "bookings_router",
    "doctors_router",
    "payments_router",
    "users_router",
]
