import pytest
from fastapi import HTTPException
from fakes import FakeBookingsRepo, FakePaymentsRepo

from dentalcare.application.services.payment_service import PaymentService, to_minor_units
from dentalcare.exceptions import PaymentProviderError


class FakeGateway:
    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def create_intent(self, amount: int, currency: str) -> str:
        if self.fail:
            raise PaymentProviderError("card_declined")
        self.calls.append((amount, currency))
        return f"pi_secret_{amount}"


def _service(gateway=None):
    bookings = FakeBookingsRepo()
    payments = FakePaymentsRepo(bookings)
    return PaymentService(payments_repo=payments, bookings_repo=bookings, gateway=gateway), bookings, payments


def test_confirm_marks_booking_paid_and_records_payment():
    svc, bookings, payments = _service()
    b1 = bookings.create("a@example.com", "2024-01-01", "Cleaning", "10am")

    out = svc.confirm(b1.id, "tx123", 99.0, "a@example.com")

    assert out.booking_id == b1.id
    assert bookings.get_by_id(b1.id).paid is True
    assert bookings.get_by_id(b1.id).transaction_id == "tx123"
    assert len(payments.payments) == 1


def test_confirm_replay_returns_existing_payment():
    svc, bookings, payments = _service()
    b1 = bookings.create("a@example.com", "2024-01-01", "Cleaning", "10am")

    first = svc.confirm(b1.id, "tx123", 99.0)
    second = svc.confirm(b1.id, "tx123", 99.0)

    assert first.id == second.id
    assert len(payments.payments) == 1


def test_confirm_unknown_booking_persists_nothing():
    svc, _, payments = _service()
    with pytest.raises(HTTPException) as exc:
        svc.confirm("missing", "tx1", 10.0)
    assert exc.value.status_code == 404
    assert payments.payments == []


def test_create_intent_converts_to_cents():
    gateway = FakeGateway()
    svc, _, _ = _service(gateway)
    assert svc.create_intent(19.99) == "pi_secret_1999"
    assert gateway.calls == [(1999, "usd")]


def test_create_intent_provider_error_is_502():
    svc, _, _ = _service(FakeGateway(fail=True))
    with pytest.raises(HTTPException) as exc:
        svc.create_intent(10)
    assert exc.value.status_code == 502


def test_create_intent_without_gateway_is_503():
    svc, _, _ = _service(None)
    with pytest.raises(HTTPException) as exc:
        svc.create_intent(10)
    assert exc.value.status_code == 503


def test_to_minor_units_rounds():
    assert to_minor_units(0.29) == 29
    assert to_minor_units(99) == 9900
