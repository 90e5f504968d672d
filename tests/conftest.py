"""
Shared pytest fixtures.
"""

from datetime import datetime, timezone

import httpx
import pytest

from focus_hub.api.deps import get_clock
from focus_hub.core.config import Settings
from focus_hub.infrastructure.local.database import Database
from focus_hub.infrastructure.local.mock_auth import MockAuthProvider
from focus_hub.interfaces.llm_provider import ILLMProvider
from focus_hub.main import create_app

# "now" for every time-window query made through the test app.
FIXED_NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


class FakeLLMProvider(ILLMProvider):
    """Records prompts and answers with canned text."""

    def __init__(self, reply: str = "1. What is 2 + 2?\nAnswer: 4"):
        self.reply = reply
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply

    def get_model_name(self) -> str:
        return "fake"


@pytest.fixture
def test_user_email():
    return "alice@example.com"


@pytest.fixture
async def database(tmp_path):
    """File-backed SQLite database with all tables created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.init()
    yield db
    await db.dispose()


@pytest.fixture
def session_factory(database):
    return database.session_factory


@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENVIRONMENT="local",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        AUTH_PROVIDER="mock",
        GOOGLE_API_KEY="",
        QUIZ_QUESTION_COUNT=5,
        DEFAULT_TIMEZONE="Asia/Dhaka",
    )


@pytest.fixture
def llm_provider():
    return FakeLLMProvider()


@pytest.fixture
def app(settings, llm_provider):
    app = create_app(settings, auth_provider=MockAuthProvider(), llm_provider=llm_provider)
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    return app


@pytest.fixture
async def client(app):
    """HTTP client bound to the app, with startup/shutdown run around it."""
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def auth_headers(test_user_email):
    return {"Authorization": f"Bearer {test_user_email}"}
