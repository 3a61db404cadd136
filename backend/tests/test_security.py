"""
Unit tests for token issue / verify.
"""
from datetime import timedelta

import pytest
from jose import jwt

from app.core.security import InvalidTokenError, TokenService


@pytest.fixture
def tokens() -> TokenService:
    return TokenService("test-secret", expires_delta=timedelta(days=1))


def test_issue_then_verify_returns_email(tokens):
    token = tokens.issue("a@x.com")
    assert tokens.verify(token) == "a@x.com"


def test_verify_rejects_token_signed_with_other_secret(tokens):
    token = TokenService("other-secret").issue("a@x.com")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_verify_rejects_expired_token():
    expired = TokenService("test-secret", expires_delta=timedelta(seconds=-30))
    token = expired.issue("a@x.com")
    with pytest.raises(InvalidTokenError):
        expired.verify(token)


def test_verify_rejects_malformed_token(tokens):
    with pytest.raises(InvalidTokenError):
        tokens.verify("not-a-jwt")


def test_verify_rejects_token_without_email(tokens):
    token = jwt.encode({"sub": "someone"}, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)
