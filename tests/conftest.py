# tests/conftest.py

import os

# Avant tout import de taskapp : settings est lu à l'import
os.environ.setdefault("ENV", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from typing import Callable, Dict, Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from taskapp.client.fetch import ApiClient, Notifier
from taskapp.client.navigation import Navigator
from taskapp.client.session import AuthState, sign_in
from taskapp.db.session import get_session, init_db
from taskapp.main import app

PASSWORD = "password123"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """SQLite en mémoire, partagé entre les threads du TestClient."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine: Engine) -> Generator[TestClient, None, None]:
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client: TestClient) -> Callable[[str], Dict[str, str]]:
    """Crée un compte, se connecte, retourne les headers Authorization."""

    def _make(username: str) -> Dict[str, str]:
        r = client.post("/api/v1/auth/sign-up", json={"username": username, "password": PASSWORD})
        assert r.status_code == 201, r.text
        r = client.post("/api/v1/auth/sign-in", json={"username": username, "password": PASSWORD})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _make


@pytest.fixture()
def alice(make_user) -> Dict[str, str]:
    return make_user("alice")


@pytest.fixture()
def bob(make_user) -> Dict[str, str]:
    return make_user("bob")


# -----------------------------
# Côté client (vues)
# -----------------------------
@pytest.fixture()
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture()
def api(client: TestClient, notifier: Notifier) -> ApiClient:
    return ApiClient(client, notifier=notifier)


@pytest.fixture()
def auth(api: ApiClient, alice) -> AuthState:
    return sign_in(api, "alice", PASSWORD)


@pytest.fixture()
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture()
def sent(client: TestClient) -> List[Tuple[str, str]]:
    """Enregistre (méthode, chemin) de chaque requête envoyée par le client HTTP."""
    sent: List[Tuple[str, str]] = []
    client.event_hooks = {
        "request": [lambda request: sent.append((request.method, request.url.path))],
        "response": [],
    }
    return sent
