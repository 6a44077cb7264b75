"""Tests for bearer token extraction and verification."""

from unittest.mock import MagicMock

import pytest

from app.errors import AuthError
from app.services.identity import (
    INVALID_TOKEN,
    MISSING_TOKEN,
    IdentityVerifier,
    extract_bearer_token,
)


@pytest.fixture
def verifier(jwt_secret):
    settings = MagicMock()
    settings.auth_jwt_secret = jwt_secret
    settings.auth_jwt_algorithm = "HS256"
    settings.auth_jwt_audience = "authenticated"
    return IdentityVerifier(settings)


class TestExtractBearerToken:
    def test_extracts(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "bearer abc"])
    def test_rejects(self, header):
        assert extract_bearer_token(header) is None


class TestVerify:
    def test_valid_token(self, verifier, make_token):
        user = verifier.verify(make_token("user-42", "a@example.com"))
        assert user.user_id == "user-42"
        assert user.email == "a@example.com"

    def test_email_optional(self, verifier, make_token):
        user = verifier.verify(make_token("user-42", None))
        assert user.email is None

    def test_missing(self, verifier):
        with pytest.raises(AuthError, match=MISSING_TOKEN):
            verifier.verify(None)

    def test_expired(self, verifier, make_token):
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            verifier.verify(make_token(expires_in=-60))

    def test_wrong_secret(self, verifier, make_token):
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            verifier.verify(make_token(secret="some-other-secret-value-for-signing"))

    def test_wrong_audience(self, verifier, make_token):
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            verifier.verify(make_token(audience="anon"))

    def test_garbage(self, verifier):
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            verifier.verify("not-a-jwt")

    def test_missing_subject(self, verifier, jwt_secret):
        from jose import jwt

        token = jwt.encode({"aud": "authenticated", "email": "x@example.com"}, jwt_secret, algorithm="HS256")
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            verifier.verify(token)

    def test_unconfigured_secret_rejects(self, make_token):
        settings = MagicMock()
        settings.auth_jwt_secret = ""
        settings.auth_jwt_algorithm = "HS256"
        settings.auth_jwt_audience = "authenticated"
        with pytest.raises(AuthError, match=INVALID_TOKEN):
            IdentityVerifier(settings).verify(make_token())
