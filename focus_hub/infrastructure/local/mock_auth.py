"""
Mock authentication provider for local development.
"""

from focus_hub.core.exceptions import AuthenticationError
from focus_hub.interfaces.auth_provider import IAuthProvider, User


class MockAuthProvider(IAuthProvider):
    """Mock auth provider: the bearer token is the caller's email."""

    async def verify_token(self, token: str) -> User:
        """
        Verify token - in mock mode, the token is treated as an email.

        Args:
            token: Caller email, or a bare name that gets ``@example.com``

        Returns:
            Mock user
        """
        token = (token or "").strip()
        if not token:
            raise AuthenticationError("Empty token")
        email = token if "@" in token else f"{token}@example.com"
        return User(id=email, email=email, display_name=email.split("@", 1)[0])
