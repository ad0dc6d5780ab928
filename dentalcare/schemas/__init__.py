# Schemas package (re-export feature modules for stable imports)
from .appointments.option import *
from .bookings.booking import *
from .users.user import *
from .doctors.doctor import *
from .payments.payment import *
from .common.common import *
