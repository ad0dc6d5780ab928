import jwt
from datetime import datetime, timedelta, timezone

from sqlmodel import select

from dentalcare.db.models import Booking, Payment

from conftest import TEST_SECRET


def test_root_liveness(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Dental care server is running"


def test_health_reports_database_ok(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["payments"]["configured"] is True


# ------------------------
# Availability
# ------------------------
def test_booked_slot_removed_from_options(client, seed):
    seed.option("Cleaning", ["9am", "10am", "11am"])
    seed.booking("a@example.com", "2024-01-01", "Cleaning", "10am")

    r = client.get("/appointmentsOptions", params={"date": "2024-01-01"})
    assert r.status_code == 200
    [cleaning] = r.json()
    assert cleaning["name"] == "Cleaning"
    assert cleaning["slots"] == ["9am", "11am"]
    assert "_id" in cleaning


def test_both_availability_endpoints_agree(client, seed):
    seed.option("Cleaning", ["9am", "10am", "11am"])
    seed.option("Surgery", ["1pm", "2pm"], price=250)
    seed.booking("a@example.com", "2024-01-01", "Cleaning", "10am")
    seed.booking("b@example.com", "2024-01-01", "Cleaning", "9am")
    seed.booking("c@example.com", "2024-01-02", "Surgery", "1pm")

    v1 = client.get("/appointmentsOptions", params={"date": "2024-01-01"}).json()
    v2 = client.get("/v2/appointmentOptions", params={"date": "2024-01-01"}).json()
    assert v1 == v2
    assert [o["slots"] for o in v1] == [["11am"], ["1pm", "2pm"]]


def test_specialty_lists_names_only(client, seed):
    seed.option("Cleaning", ["9am"])
    body = client.get("/appointmentSpecialty").json()
    assert body == [{"_id": body[0]["_id"], "name": "Cleaning"}]


# ------------------------
# Bookings
# ------------------------
def test_booking_conflict_does_not_insert(client, db):
    payload = {"email": "a@example.com", "appointmentDate": "2024-01-01", "treatment": "Cleaning", "slot": "9am"}

    first = client.post("/bookings", json=payload).json()
    assert first["acknowledged"] is True
    assert first["insertedId"]

    second = client.post("/bookings", json={**payload, "slot": "10am"})
    assert second.status_code == 200
    assert second.json() == {"acknowledged": False, "message": "You already have a booking on 2024-01-01"}
    assert len(db.exec(select(Booking)).all()) == 1


def test_list_bookings_requires_header(client):
    r = client.get("/bookings", params={"email": "a@example.com"})
    assert r.status_code == 401


def test_list_bookings_rejects_non_bearer_scheme(client, token_for):
    basic = client.get("/bookings", params={"email": "a@example.com"}, headers={"Authorization": "Basic YWJjOmRlZg=="})
    assert basic.status_code == 401
    assert basic.json()["error"] == "Unauthorized Access"

    # A valid token under the wrong scheme is still unauthenticated
    token = token_for("a@example.com")["Authorization"].split(" ", 1)[1]
    wrong = client.get("/bookings", params={"email": "a@example.com"}, headers={"Authorization": f"Token {token}"})
    assert wrong.status_code == 401


def test_list_bookings_rejects_bad_token(client):
    r = client.get("/bookings", params={"email": "a@example.com"}, headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 403


def test_list_bookings_rejects_expired_token(client):
    expired = jwt.encode(
        {"email": "a@example.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        TEST_SECRET,
        algorithm="HS256",
    )
    r = client.get("/bookings", params={"email": "a@example.com"}, headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 403


def test_list_bookings_email_must_match_identity(client, seed, token_for):
    seed.booking("a@example.com", "2024-01-01", "Cleaning", "9am")

    ok = client.get("/bookings", params={"email": "a@example.com"}, headers=token_for("a@example.com"))
    assert ok.status_code == 200
    assert [b["slot"] for b in ok.json()] == ["9am"]

    other = client.get("/bookings", params={"email": "a@example.com"}, headers=token_for("b@example.com"))
    assert other.status_code == 403


def test_get_single_booking(client, seed):
    booking_id = seed.booking("a@example.com", "2024-01-01", "Cleaning", "9am")
    body = client.get(f"/bookings/{booking_id}").json()
    assert body["_id"] == booking_id
    assert body["appointmentDate"] == "2024-01-01"
    assert body["paid"] is False

    assert client.get("/bookings/unknown").status_code == 404


# ------------------------
# Users & tokens
# ------------------------
def test_jwt_issued_only_for_known_users(client, seed):
    seed.user("a@example.com")

    ok = client.get("/jwt", params={"email": "a@example.com"})
    assert ok.status_code == 200
    claims = jwt.decode(ok.json()["accessToken"], TEST_SECRET, algorithms=["HS256"])
    assert claims["email"] == "a@example.com"

    denied = client.get("/jwt", params={"email": "ghost@example.com"})
    assert denied.status_code == 403
    assert denied.json() == {"accessToken": ""}


def test_create_and_list_users(client):
    created = client.post("/users", json={"email": "a@example.com", "name": "Ann"}).json()
    assert created["acknowledged"] is True

    dup = client.post("/users", json={"email": "a@example.com", "name": "Ann"}).json()
    assert dup["acknowledged"] is False

    users = client.get("/users").json()
    assert [u["email"] for u in users] == ["a@example.com"]
    assert users[0]["_id"] == created["insertedId"]


def test_promote_requires_admin(client, seed, token_for):
    target = seed.user("b@example.com")
    seed.user("a@example.com")

    r = client.put(f"/users/admin/{target}", headers=token_for("a@example.com"))
    assert r.status_code == 403
    assert client.get("/users/admin/b@example.com").json() == {"isAdmin": False}


def test_admin_promotes_user(client, seed, token_for):
    target = seed.user("b@example.com")
    seed.user("root@example.com", role="admin")

    r = client.put(f"/users/admin/{target}", headers=token_for("root@example.com"))
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}
    assert client.get("/users/admin/b@example.com").json() == {"isAdmin": True}


# ------------------------
# Doctors
# ------------------------
def test_doctor_routes_need_admin(client, seed, token_for):
    seed.user("a@example.com")
    assert client.get("/doctors").status_code == 401
    assert client.get("/doctors", headers=token_for("a@example.com")).status_code == 403
    # A valid token for an identity with no user record is still not an admin
    assert client.get("/doctors", headers=token_for("nobody@example.com")).status_code == 403


def test_admin_manages_doctors(client, seed, token_for):
    seed.user("root@example.com", role="admin")
    headers = token_for("root@example.com")

    created = client.post("/doctors", json={"name": "Dr. Rahman", "specialty": "Oral Surgery"}, headers=headers).json()
    assert created["acknowledged"] is True

    doctors = client.get("/doctors", headers=headers).json()
    assert [(d["_id"], d["name"]) for d in doctors] == [(created["insertedId"], "Dr. Rahman")]

    deleted = client.delete(f"/doctors/{created['insertedId']}", headers=headers).json()
    assert deleted == {"acknowledged": True, "deletedCount": 1}
    assert client.get("/doctors", headers=headers).json() == []


# ------------------------
# Payments
# ------------------------
def test_payment_intent_amount_in_cents(client, gateway):
    r = client.post("/create-payment-intent", json={"price": 99, "treatment": "Cleaning"})
    assert r.status_code == 200
    assert r.json() == {"clientSecret": "pi_test_secret_9900"}
    assert gateway.calls == [(9900, "usd")]


def test_payment_intent_rejects_non_positive_price(client, gateway):
    assert client.post("/create-payment-intent", json={"price": 0}).status_code == 422
    assert gateway.calls == []


def test_payment_marks_booking_paid(client, db, seed):
    b1 = seed.booking("a@example.com", "2024-01-01", "Cleaning", "9am")

    r = client.post("/payments", json={"bookingId": b1, "transactionId": "tx123", "price": 99, "email": "a@example.com"})
    assert r.status_code == 200
    assert r.json()["acknowledged"] is True

    db.expire_all()
    booking = db.get(Booking, b1)
    assert booking.paid is True
    assert booking.transaction_id == "tx123"
    payments = db.exec(select(Payment)).all()
    assert [(p.booking_id, p.transaction_id) for p in payments] == [(b1, "tx123")]


def test_payment_replay_is_idempotent(client, db, seed):
    b1 = seed.booking("a@example.com", "2024-01-01", "Cleaning", "9am")
    body = {"bookingId": b1, "transactionId": "tx123", "amount": 99}

    first = client.post("/payments", json=body).json()
    second = client.post("/payments", json=body).json()
    assert first["insertedId"] == second["insertedId"]
    assert len(db.exec(select(Payment)).all()) == 1


def test_payment_for_unknown_booking_is_404(client, db):
    r = client.post("/payments", json={"bookingId": "missing", "transactionId": "tx9", "price": 10})
    assert r.status_code == 404
    assert db.exec(select(Payment)).all() == []


def test_startup_seeds_empty_catalog(settings, gateway):
    from fastapi.testclient import TestClient
    from dentalcare.database import build_engine
    from dentalcare.main import create_app

    seeded = settings.model_copy(update={"SEED_APPOINTMENT_OPTIONS": True})
    app = create_app(settings=seeded, engine=build_engine("sqlite://"), payment_gateway=gateway)
    with TestClient(app) as c:
        names = [o["name"] for o in c.get("/appointmentSpecialty").json()]
        options = c.get("/appointmentsOptions", params={"date": "2030-05-01"}).json()

    assert len(names) == 6
    assert "Teeth Cleaning" in names
    assert all(o["slots"] for o in options)


def test_startup_failure_reports_degraded_health(settings, gateway, tmp_path):
    from fastapi.testclient import TestClient
    from dentalcare.database import build_engine
    from dentalcare.main import create_app

    unreachable = build_engine(f"sqlite:///{tmp_path / 'missing' / 'dentalcare.db'}")
    app = create_app(settings=settings, engine=unreachable, payment_gateway=gateway)
    with TestClient(app) as c:
        assert c.get("/").status_code == 200
        body = c.get("/health").json()

    assert body["status"] == "degraded"
    assert body["database"]["ok"] is False
    assert body["database"]["error"]


def test_payment_intent_rejects_infinite_price(client, gateway):
    r = client.post(
        "/create-payment-intent",
        content='{"price": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 422
    assert gateway.calls == []
