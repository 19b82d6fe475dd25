import os

# Lifespan sans Redis: à poser avant l'import de l'app
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import pytest
from typing import Any, Dict, Generator, List, Optional
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from atelier.app import app as fastapi_app
from atelier.config import Settings
from atelier.currency import service as currency_service

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeQuery:
    """
    Query builder PostgREST minimal: enregistre les appels chaînés,
    execute() renvoie les lignes de la table (ou lève l'erreur configurée).
    """
    def __init__(self, table: str, rows: List[Dict[str, Any]], error: Optional[Exception] = None):
        self.table_name = table
        self._rows = rows
        self._error = error
        self._single = False
        self.calls: List[tuple] = []

    def _chain(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._chain("select", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._chain("eq", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._chain("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._chain("limit", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._chain("insert", *args, **kwargs)

    def update(self, *args, **kwargs):
        return self._chain("update", *args, **kwargs)

    def upsert(self, *args, **kwargs):
        return self._chain("upsert", *args, **kwargs)

    def single(self):
        self._single = True
        return self._chain("single")

    def maybe_single(self):
        self._single = True
        return self._chain("maybe_single")

    def execute(self):
        self.calls.append(("execute", (), {}))
        if self._error is not None:
            raise self._error
        if self._single:
            return MagicMock(data=(self._rows[0] if self._rows else None))
        return MagicMock(data=list(self._rows))


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.errors: Dict[str, Exception] = {}
        self.queries: List[FakeQuery] = []

    def table(self, name: str) -> FakeQuery:
        q = FakeQuery(name, self.tables.get(name, []), self.errors.get(name))
        self.queries.append(q)
        return q

    def queries_for(self, name: str) -> List[FakeQuery]:
        return [q for q in self.queries if q.table_name == name]


@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def settings() -> Settings:
    return Settings(
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret="whsec_test",
        site_url="https://shop.example.com/en",
    )

def _rejecting_auth_client():
    auth_client = MagicMock()
    auth_client.auth.get_user.side_effect = Exception("invalid JWT")
    auth_client.auth.refresh_session.side_effect = Exception("invalid refresh token")
    return auth_client

# Accès Supabase neutralisés pour tous les tests (aucun appel réseau)
@pytest.fixture(autouse=True)
def fake_supabase(monkeypatch) -> FakeSupabase:
    fake = FakeSupabase()
    monkeypatch.setattr("atelier.infra.supabase_client.get_supabase", lambda: fake)
    monkeypatch.setattr("atelier.infra.supabase_client.get_service_supabase", lambda: fake)
    monkeypatch.setattr("atelier.infra.supabase_client.get_auth_supabase", _rejecting_auth_client)
    return fake

# Taux de change figé + cache remis à zéro entre les tests
@pytest.fixture(autouse=True)
def _fixed_exchange_rate(monkeypatch):
    monkeypatch.setattr(
        "atelier.currency.service.get_settings",
        lambda: Settings(exchange_rate_usd_to_cad="1.25"),
    )
    currency_service.reset_cache()
    yield
    currency_service.reset_cache()
