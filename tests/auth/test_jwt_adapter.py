"""Unit tests for the JWT token adapter."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from library_api.auth.adapters.base import AuthenticationError
from library_api.auth.adapters.jwt import JWTAuthAdapter
from library_api.database.models import UserDocument


@pytest.fixture
def sample_user():
    return UserDocument(id="65f1c0ffee0000000000abcd", username="mluukkai", favorite_genre="design")


class TestJWTAdapter:
    """Test JWT token adapter."""

    @pytest.mark.asyncio
    async def test_issue_and_verify_token(self, token_adapter, sample_user):
        """Issued tokens verify and carry username and id."""
        token = await token_adapter.issue_token(sample_user)

        claims = await token_adapter.verify_token(token)

        assert claims == {"username": "mluukkai", "id": "65f1c0ffee0000000000abcd"}

    @pytest.mark.asyncio
    async def test_issued_token_has_no_expiry_by_default(self, token_adapter, secret_key, sample_user):
        token = await token_adapter.issue_token(sample_user)

        payload = jwt.decode(token, secret_key, algorithms=["HS256"])
        assert "exp" not in payload
        assert payload["username"] == "mluukkai"

    @pytest.mark.asyncio
    async def test_issued_token_expiry_when_configured(self, secret_key, sample_user):
        adapter = JWTAuthAdapter(secret_key=secret_key, token_expiry_hours=2)

        token = await adapter.issue_token(sample_user)

        payload = jwt.decode(token, secret_key, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 2 * 3600

    @pytest.mark.asyncio
    async def test_verify_token_signed_with_other_secret(self, token_adapter, sample_user):
        """A token from another secret holder is rejected."""
        other = JWTAuthAdapter(secret_key="some-other-secret")
        token = await other.issue_token(sample_user)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await token_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_expired_token(self, token_adapter, secret_key):
        past = datetime.now(UTC) - timedelta(hours=2)
        payload = {
            "username": "mluukkai",
            "id": "65f1c0ffee0000000000abcd",
            "iat": past,
            "exp": past + timedelta(minutes=30),
        }
        expired_token = jwt.encode(payload, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await token_adapter.verify_token(expired_token)

    @pytest.mark.asyncio
    async def test_verify_malformed_token(self, token_adapter):
        with pytest.raises(AuthenticationError):
            await token_adapter.verify_token("not-a-jwt")

    @pytest.mark.asyncio
    async def test_verify_token_missing_id_claim(self, token_adapter, secret_key):
        token = jwt.encode({"username": "mluukkai"}, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="missing"):
            await token_adapter.verify_token(token)
