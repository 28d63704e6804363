"""
Shared fixtures for the atlas tests.

Settings are read from the environment at import time, so the variables are
set here before anything under `atlas` is imported. Each test then gets its
own in-memory database wired into the app through the get_db override.
"""

import os
import tempfile
from types import SimpleNamespace

_scratch = tempfile.mkdtemp(prefix="atlas-tests-")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length-for-hs256")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_scratch, 'atlas.db')}"
os.environ["ATLAS_CONFIG_DIR"] = os.path.join(_scratch, "client")

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from atlas.main import app  # noqa: E402
from atlas.config import get_settings  # noqa: E402
from atlas.database import Base, get_db  # noqa: E402
from atlas.database_seeder import seed_baseline_rules  # noqa: E402
from atlas_client.campaign.state import AtlasState  # noqa: E402

OWNER_ID = "owner-0001"
GUEST_ID = "guest-0002"
API_URL = "http://testserver/api/v1"


def make_token(user_id: str, email: str = None) -> str:
    """Access token shaped like the ones the auth platform issues"""
    return jwt.encode(
        {"sub": user_id, "aud": "authenticated", "email": email or f"{user_id}@example.com"},
        get_settings().SUPABASE_JWT_SECRET,
        algorithm="HS256"
    )


def bearer(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def db_session():
    """Fresh in-memory database with the baseline rules seeded"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    seed_baseline_rules(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """TestClient bound to the per-test database"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def owner_headers():
    return bearer(OWNER_ID)


@pytest.fixture
def guest_headers():
    return bearer(GUEST_ID)


@pytest.fixture
def make_world(client, owner_headers):
    """Create a world through the API as the owner"""
    def _make_world(name="Faerûn", is_public=False, **extra):
        response = client.post(
            "/api/v1/worlds/",
            json={"name": name, "is_public": is_public, **extra},
            headers=owner_headers
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_world


@pytest.fixture
def add_row(client, owner_headers):
    """Create a content row in a world as the owner"""
    def _add_row(world_id, collection, **data):
        response = client.post(
            f"/api/v1/worlds/{world_id}/{collection}/",
            json=data,
            headers=owner_headers
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _add_row


@pytest.fixture
def atlas_state():
    """Client session state isolated from the module-level instance"""
    return AtlasState()


@pytest.fixture
def owner_state(atlas_state):
    atlas_state.set_auth({
        "access_token": make_token(OWNER_ID),
        "refresh_token": "owner-refresh",
        "user_id": OWNER_ID,
        "email": f"{OWNER_ID}@example.com"
    })
    return atlas_state


class FakeAuth:
    """Stand-in for the auth platform client used by the auth service"""

    def __init__(self, user_id=OWNER_ID, fail=False, with_session=True):
        self.user_id = user_id
        self.fail = fail
        self.with_session = with_session
        self.signed_out = False

    def _response(self, email=None):
        if self.fail:
            raise RuntimeError("Invalid login credentials")
        session = SimpleNamespace(
            access_token=make_token(self.user_id, email),
            refresh_token=f"{self.user_id}-refresh"
        ) if self.with_session else None
        return SimpleNamespace(
            session=session,
            user=SimpleNamespace(id=self.user_id, email=email or f"{self.user_id}@example.com")
        )

    def sign_up(self, credentials):
        return self._response(credentials["email"])

    def sign_in_with_password(self, credentials):
        return self._response(credentials["email"])

    def refresh_session(self, refresh_token):
        return self._response()

    def sign_out(self):
        self.signed_out = True


@pytest.fixture
def fake_auth(monkeypatch):
    """Route auth platform calls to a FakeAuth"""
    fake = FakeAuth()
    monkeypatch.setattr(
        "atlas.services.auth_service.get_supabase",
        lambda: SimpleNamespace(auth=fake)
    )
    return fake
