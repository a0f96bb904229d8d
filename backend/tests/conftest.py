"""
Shared pytest fixtures.

Provides an in-memory document store and a TestClient wired to it, so the
suite runs without MongoDB.
"""

import copy
import os
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Ensure test environment before settings are cached
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("RATE_LIMIT", "1000/minute")
os.environ.setdefault("LOG_DIR", "")


class StoreUnavailable(Exception):
    """Raised by FakeStore when told to fail."""


def _values_at(doc: Dict[str, Any], path: str) -> List[Any]:
    """Values reachable through a dotted path, descending into arrays like MongoDB does."""
    current: List[Any] = [doc]
    for key in path.split("."):
        found: List[Any] = []
        for item in current:
            if isinstance(item, list):
                found.extend(i[key] for i in item if isinstance(i, dict) and key in i)
            elif isinstance(item, dict) and key in item:
                found.append(item[key])
        current = found
    values: List[Any] = []
    for value in current:
        values.extend(value if isinstance(value, list) else [value])
    return values


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(expected in _values_at(doc, path) for path, expected in query.items())


class FakeStore:
    """DocumentStore over plain lists of dicts, supporting equality filters only."""

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None, fail: bool = False):
        self.collections = collections or {}
        self.fail = fail
        self.queries: List[tuple] = []

    def _scan(self, collection: str, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.queries.append((collection, query))
        if self.fail:
            raise StoreUnavailable("connection refused")
        return [copy.deepcopy(d) for d in self.collections.get(collection, []) if _matches(d, query)]

    async def find(self, collection: str, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return self._scan(collection, query)

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        docs = self._scan(collection, query)
        return docs[0] if docs else None


@pytest.fixture
def patients() -> List[Dict[str, Any]]:
    return [
        {
            "UHID": "P1",
            "firstName": "Jane",
            "lastName": "Doe",
            "age": 30,
            "phoneNumber": "555",
            "totalAppointments": 2,
        },
        {
            "UHID": "P2",
            "firstName": "John",
            "lastName": "Smith",
            "age": 45,
            "phoneNumber": "556",
            "totalAppointments": 1,
        },
    ]


@pytest.fixture
def doctors() -> List[Dict[str, Any]]:
    return [
        {
            "name": "Dr. X",
            "dept_name": "Cardio",
            "appointments": [
                {"patientId": "P1", "appointmentDate": "2024-01-01", "appointmentTime": "10:00"},
                {"patientId": "P2", "appointmentDate": "2024-01-01", "appointmentTime": "10:30"},
            ],
        },
        {
            "name": "Dr. Y",
            "dept_name": "Neuro",
            "appointments": [
                {"patientId": "P1", "appointmentDate": "2023-12-05", "appointmentTime": "09:00"},
                {"patientId": "GHOST", "appointmentDate": "2024-02-02", "appointmentTime": "08:00"},
            ],
        },
        {
            "name": "Dr. Z",
            "dept_name": "Derma",
            "appointments": [],
        },
    ]


@pytest.fixture
def store(patients, doctors) -> FakeStore:
    return FakeStore({"patients": patients, "doctors": doctors})


@pytest.fixture
def failing_store() -> FakeStore:
    return FakeStore(fail=True)


@pytest.fixture
def make_client():
    """Build a TestClient whose requests use the given store."""
    from app.deps import get_store
    from app.main import app

    def _make(store: FakeStore) -> TestClient:
        app.dependency_overrides[get_store] = lambda: store
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, store) -> TestClient:
    return make_client(store)
