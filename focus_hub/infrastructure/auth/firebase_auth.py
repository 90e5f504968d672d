"""
Firebase ID token authentication provider.

Firebase ID tokens are RS256 JWTs signed with Google-managed keys, issued by
``https://securetoken.google.com/<project>`` for audience ``<project>``.
"""

from __future__ import annotations

import time
from typing import Any

import httpx
from jose import JWTError, jwt

from focus_hub.core.config import Settings
from focus_hub.core.exceptions import AuthenticationError
from focus_hub.core.logger import setup_logger
from focus_hub.interfaces.auth_provider import IAuthProvider, User

logger = setup_logger(__name__)

_ISSUER_PREFIX = "https://securetoken.google.com/"


class FirebaseAuthProvider(IAuthProvider):
    """Firebase authentication provider with JWKS validation."""

    def __init__(self, settings: Settings, jwks_ttl_seconds: int = 3600):
        if not settings.FIREBASE_PROJECT_ID:
            raise ValueError("FIREBASE_PROJECT_ID must be set for firebase auth")
        self._settings = settings
        self._jwks_ttl_seconds = jwks_ttl_seconds
        self._jwks_cache: dict[str, Any] | None = None
        self._jwks_cache_expiry: float = 0.0

    @property
    def issuer(self) -> str:
        return f"{_ISSUER_PREFIX}{self._settings.FIREBASE_PROJECT_ID}"

    async def _get_jwks(self) -> dict[str, Any]:
        now = time.time()
        if self._jwks_cache and now < self._jwks_cache_expiry:
            return self._jwks_cache

        async with httpx.AsyncClient(timeout=10.0) as client:
            response = await client.get(self._settings.FIREBASE_JWKS_URL)
            response.raise_for_status()
            jwks = response.json()

        self._jwks_cache = jwks
        self._jwks_cache_expiry = now + self._jwks_ttl_seconds
        return jwks

    async def _decode_token(self, token: str) -> dict[str, Any]:
        header = jwt.get_unverified_header(token)
        jwks = await self._get_jwks()
        key = None
        for candidate in jwks.get("keys", []):
            if candidate.get("kid") == header.get("kid"):
                key = candidate
                break
        if not key:
            raise JWTError("Signing key not found")

        return jwt.decode(
            token,
            key,
            algorithms=["RS256"],
            audience=self._settings.FIREBASE_PROJECT_ID,
            issuer=self.issuer,
        )

    async def verify_token(self, token: str) -> User:
        try:
            claims = await self._decode_token(token)
        except (JWTError, httpx.HTTPError) as exc:
            logger.info(f"Rejected token: {exc}")
            raise AuthenticationError("unauthorized access") from exc

        subject = claims.get("sub")
        email = claims.get("email")
        if not subject or not email:
            raise AuthenticationError("Token carries no subject or email")

        return User(id=subject, email=email, display_name=claims.get("name"))
