import os
import tempfile
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

# Environment must be in place before any kisaanmitra module is imported.
_tmpdir = tempfile.mkdtemp(prefix="kisaanmitra-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmpdir}/test.db"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["ENABLE_DEBUG_ROUTES"] = "1"
os.environ["OPENAI_API_KEY"] = ""

from kisaanmitra.ai.verifier import Verdict  # noqa: E402
from kisaanmitra.auth.models import User  # noqa: E402
from kisaanmitra.core.security import hash_password  # noqa: E402
from kisaanmitra.db.base import Base, SessionLocal, engine  # noqa: E402
from kisaanmitra.main import app  # noqa: E402, F401


class FakeVerifier:
    """Returns queued verdicts (or raises queued exceptions) in order."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    async def verify(self, title, description, image_b64):
        self.calls.append((title, description, image_b64))
        item = self.results.pop(0) if self.results else Verdict(True, "Looks right.")
        if isinstance(item, Exception):
            raise item
        return item


def fake_openai_client(create):
    """Minimal stand-in for openai.AsyncOpenAI exposing chat.completions.create."""
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def failing_commit(*args, **kwargs):
    """Drop-in for Session.commit that fails like a locked or full database."""
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def farmer(db):
    user = User(
        email="ramesh@example.com",
        username="ramesh",
        name="Ramesh",
        password_hash=hash_password("password123"),
        role="Farmer",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
