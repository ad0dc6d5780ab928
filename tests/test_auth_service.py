import time

import jwt

from fakes import FakeUserRepo

from dentalcare.application.ports.user_repo import UserDto
from dentalcare.application.services.auth_service import AuthService
from dentalcare.application.services.user_service import UserService
from dentalcare.config import Settings
from dentalcare.utils import create_jwt_token, decode_jwt_token


def _settings():
    return Settings(SECRET_KEY="unit-test-secret-0123456789abcdefghij")


def test_issue_token_for_known_email_carries_email_claim():
    repo = FakeUserRepo([UserDto(id="u1", email="a@example.com", name="Ann", role=None)])
    svc = AuthService(user_repo=repo, settings=_settings())
    token = svc.issue_token("a@example.com")
    payload = jwt.decode(token, "unit-test-secret-0123456789abcdefghij", algorithms=["HS256"])
    assert payload["email"] == "a@example.com"
    assert 7 * 86400 - 60 <= payload["exp"] - time.time() <= 7 * 86400 + 60


def test_issue_token_for_unknown_email_is_none():
    svc = AuthService(user_repo=FakeUserRepo(), settings=_settings())
    assert svc.issue_token("ghost@example.com") is None


def test_decode_rejects_wrong_secret_and_placeholder():
    token = create_jwt_token({"email": "a@example.com"}, _settings())
    assert decode_jwt_token(token, Settings(SECRET_KEY="another-secret-0123456789abcdefghijkl")) is None
    assert decode_jwt_token(token, Settings(SECRET_KEY="change-me-in-prod")) is None
    assert decode_jwt_token(token, _settings())["email"] == "a@example.com"


def test_register_rejects_duplicate_email():
    svc = UserService(user_repo=FakeUserRepo())
    assert svc.register("a@example.com", "Ann") is not None
    assert svc.register("a@example.com", "Ann again") is None


def test_promote_and_admin_check():
    repo = FakeUserRepo([UserDto(id="u1", email="a@example.com", name=None, role=None)])
    svc = UserService(user_repo=repo)
    assert svc.is_admin("a@example.com") is False
    assert svc.promote_to_admin("u1") == (1, 1)
    assert svc.promote_to_admin("u1") == (1, 0)
    assert svc.promote_to_admin("missing") == (0, 0)
    assert svc.is_admin("a@example.com") is True
    assert svc.is_admin("nobody@example.com") is False
