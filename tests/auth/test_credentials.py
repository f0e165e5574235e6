"""Unit tests for the credential service (no database dependencies)."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from tasklists.auth.credentials import CredentialService

TEST_SECRET = "test-secret-key-for-testing-only"


def _encode(payload: dict, secret: str = TEST_SECRET) -> str:
    return jwt.encode(payload, secret, algorithm="HS256")


def _claims(**overrides) -> dict:
    now = datetime.now(UTC)
    payload = {
        "iss": "test-tasklists",
        "aud": "test-api",
        "sub": "user-123",
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(hours=1),
    }
    payload.update(overrides)
    return payload


class TestPasswordHashing:
    def test_hash_is_salted_and_not_plaintext(self, credentials):
        first = credentials.hash_password("s3cret")
        second = credentials.hash_password("s3cret")

        assert first != "s3cret"
        assert first != second

    def test_verify_matching_password(self, credentials):
        hashed = credentials.hash_password("s3cret")
        assert credentials.verify_password("s3cret", hashed) is True

    def test_verify_wrong_password_returns_false(self, credentials):
        hashed = credentials.hash_password("s3cret")
        assert credentials.verify_password("not-it", hashed) is False

    def test_verify_against_malformed_hash_returns_false(self, credentials):
        assert credentials.verify_password("s3cret", "plaintext-not-bcrypt") is False

    def test_password_longer_than_72_bytes(self, credentials):
        password = "p" * 80
        hashed = credentials.hash_password(password)

        assert credentials.verify_password(password, hashed) is True
        assert credentials.verify_password("p" * 72, hashed) is True
        assert credentials.verify_password("q" * 80, hashed) is False

    def test_multibyte_password_past_limit(self, credentials):
        password = "\u00e9" * 50
        hashed = credentials.hash_password(password)

        assert credentials.verify_password(password, hashed) is True


class TestTokens:
    def test_issue_then_verify_round_trip(self, credentials):
        user_id = uuid4()
        token = credentials.issue_token(user_id)

        assert credentials.verify_token(token) == str(user_id)

    def test_issued_token_expires_in_thirty_days(self, credentials):
        token = credentials.issue_token(uuid4())
        payload = jwt.decode(
            token, TEST_SECRET, algorithms=["HS256"], audience="test-api", issuer="test-tasklists"
        )

        lifetime = payload["exp"] - payload["iat"]
        assert lifetime == int(timedelta(days=30).total_seconds())

    def test_expired_token_is_invalid(self, credentials):
        past = datetime.now(UTC) - timedelta(days=31)
        token = _encode(_claims(iat=past, nbf=past, exp=past + timedelta(days=30)))

        assert credentials.verify_token(token) is None

    def test_bad_signature_is_invalid(self, credentials):
        token = _encode(_claims(), secret="some-other-secret")
        assert credentials.verify_token(token) is None

    def test_wrong_audience_is_invalid(self, credentials):
        token = _encode(_claims(aud="someone-else"))
        assert credentials.verify_token(token) is None

    def test_missing_subject_is_invalid(self, credentials):
        claims = _claims()
        del claims["sub"]
        assert credentials.verify_token(_encode(claims)) is None

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_invalid(self, credentials, token):
        assert credentials.verify_token(token) is None

    def test_custom_expiry(self):
        service = CredentialService(
            secret_key=TEST_SECRET, token_expiry_days=1, bcrypt_rounds=4
        )
        payload = jwt.decode(
            service.issue_token("abc"),
            TEST_SECRET,
            algorithms=["HS256"],
            audience=service.audience,
            issuer=service.issuer,
        )
        assert payload["exp"] - payload["iat"] == 86400
