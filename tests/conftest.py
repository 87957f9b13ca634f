"""Pytest configuration shared by all test suites.

Environment variables are set before any application module is imported so
the cached Settings see the test configuration:
- In-memory SQLite (aiosqlite) instead of PostgreSQL
- bcrypt cost factor 4 (fast hashing)
- Stub email backend
"""

import os

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"
os.environ["JWT_EXPIRE_HOURS"] = "24"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["EMAIL_BACKEND"] = "stub"
os.environ["WEB_APP_URL"] = "https://app.example.com"
os.environ["AUTO_CREATE_SCHEMA"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from credential_service.core.container import clear_singletons  # noqa: E402
from credential_service.domain.value_objects import EmailMessage  # noqa: E402
from credential_service.infrastructure.email.base import BaseEmailService  # noqa: E402
from credential_service.infrastructure.persistence.database import Database  # noqa: E402
from credential_service.infrastructure.security import BcryptPasswordService  # noqa: E402

TEST_DATABASE_URL = os.environ["DATABASE_URL"]


class RecordingEmailService(BaseEmailService):
    """Email service that keeps rendered messages in memory."""

    def __init__(self) -> None:
        super().__init__(from_address="no-reply@example.com")
        self.messages: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.messages.append(message)

    def last_link_token(self) -> str:
        """Token query parameter of the link in the most recent message."""
        body = self.messages[-1].html_body
        start = body.index("token=") + len("token=")
        return body[start : body.index('"', start)]


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Each test starts with fresh settings and app-scoped services."""
    clear_singletons()
    yield
    clear_singletons()


@pytest.fixture
def recording_email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture(scope="session")
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables created."""
    db = Database(TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.get_session() as session:
        yield session
