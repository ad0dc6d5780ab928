import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from dentalcare.config import Settings
from dentalcare.database import build_engine
from dentalcare.db.models import AppointmentOption, Booking, User
from dentalcare.infrastructure.rate_limit.memory_rate_limiter import InMemoryRateLimiter
from dentalcare.main import create_app
from dentalcare.utils import create_jwt_token

TEST_SECRET = "api-test-secret-0123456789abcdefghijklmn"


class FakeGateway:
    def __init__(self):
        self.calls = []

    def create_intent(self, amount: int, currency: str) -> str:
        self.calls.append((amount, currency))
        return f"pi_test_secret_{amount}"


@pytest.fixture
def settings():
    return Settings(
        SECRET_KEY=TEST_SECRET,
        DATABASE_URL="sqlite://",
        SEED_APPOINTMENT_OPTIONS=False,
        RATE_LIMIT_PER_MINUTE=10000,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def app(settings, gateway):
    engine = build_engine(settings.DATABASE_URL)
    return create_app(settings=settings, engine=engine, payment_gateway=gateway, rate_limiter=InMemoryRateLimiter())


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    with Session(app.state.engine) as session:
        yield session


@pytest.fixture
def token_for(settings):
    def _make(email: str) -> dict:
        return {"Authorization": f"Bearer {create_jwt_token({'email': email}, settings)}"}
    return _make


@pytest.fixture
def seed(db):
    """Helpers that write fixtures straight into the store."""
    class _Seed:
        def option(self, name, slots, price=99.0):
            o = AppointmentOption(name=name, price=price, slots=slots)
            db.add(o)
            db.commit()
            return o.id

        def booking(self, email, date, treatment, slot):
            b = Booking(email=email, appointment_date=date, treatment=treatment, slot=slot)
            db.add(b)
            db.commit()
            return b.id

        def user(self, email, role=None):
            u = User(email=email, role=role)
            db.add(u)
            db.commit()
            return u.id

    return _Seed()
