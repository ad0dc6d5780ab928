# Models package (re-export feature modules for stable imports)
from .appointments.option import AppointmentOption
from .appointments.booking import Booking
from .users.user import User
from .health.doctor import Doctor
from .billing.payment import Payment

__all__ = [
    "AppointmentOption",
    "Booking",
    "User",
    "Doctor",
    "Payment",
]
