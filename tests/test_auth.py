"""Tests for admin and department authentication."""

import re
from uuid import uuid4

import pytest
from fastapi import HTTPException

from wayfinder.auth import (
    DepartmentTokenError,
    check_admin_password,
    create_department_token,
    decode_department_token,
    generate_department_id,
    generate_password,
    hash_password,
    require_admin,
    require_department,
    require_department_access,
    verify_password,
)
from wayfinder.auth.admin import bearer_token
from wayfinder.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_password="letmein", jwt_secret="test-secret")


class TestAdminAuth:
    def test_bearer_token(self):
        assert bearer_token("Bearer abc") == "abc"
        assert bearer_token("Basic abc") is None
        assert bearer_token(None) is None

    def test_check_admin_password(self, settings):
        assert check_admin_password(settings, "letmein") is True
        assert check_admin_password(settings, "wrong") is False

    async def test_require_admin_accepts_password(self, settings):
        assert await require_admin("Bearer letmein", settings) is None

    async def test_require_admin_missing_header(self, settings):
        with pytest.raises(HTTPException) as exc:
            await require_admin(None, settings)
        assert exc.value.status_code == 401

    async def test_require_admin_wrong_token(self, settings):
        with pytest.raises(HTTPException) as exc:
            await require_admin("Bearer nope", settings)
        assert exc.value.status_code == 403


class TestCredentials:
    def test_department_id_format(self):
        assert re.fullmatch(r"DEPT-[A-Z0-9]{8}", generate_department_id())

    def test_password_length_and_uniqueness(self):
        first, second = generate_password(), generate_password()

        assert len(first) == 12
        assert first != second

    def test_hash_and_verify(self):
        hashed = hash_password("secret123")

        assert hashed != "secret123"
        assert verify_password("secret123", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_verify_rejects_malformed_hash(self):
        assert verify_password("secret123", "not-a-hash") is False


class TestDepartmentToken:
    def test_round_trip(self, settings):
        department_id = str(uuid4())
        token = create_department_token(settings, department_id, "computer-science")

        claims = decode_department_token(settings, token)
        assert claims.department_id == department_id
        assert claims.department_slug == "computer-science"

    def test_wrong_secret(self, settings):
        token = create_department_token(settings, str(uuid4()), "cs")
        other = Settings(jwt_secret="different")

        with pytest.raises(DepartmentTokenError):
            decode_department_token(other, token)

    def test_expired(self):
        settings = Settings(jwt_secret="s", jwt_expire_hours=-1)
        token = create_department_token(settings, str(uuid4()), "cs")

        with pytest.raises(DepartmentTokenError):
            decode_department_token(settings, token)

    async def test_require_department(self, settings):
        token = create_department_token(settings, "abc", "cs")

        auth = await require_department(f"Bearer {token}", settings)
        assert auth.department_slug == "cs"

    async def test_require_department_invalid(self, settings):
        with pytest.raises(HTTPException) as exc:
            await require_department("Bearer garbage", settings)
        assert exc.value.status_code == 403

    async def test_require_department_access_other_department(self, settings):
        own, other = uuid4(), uuid4()
        auth = await require_department(
            f"Bearer {create_department_token(settings, str(own), 'cs')}", settings
        )

        assert await require_department_access(own, auth) is auth
        with pytest.raises(HTTPException) as exc:
            await require_department_access(other, auth)
        assert exc.value.status_code == 403
