"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
from itertools import count
from typing import Any, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

os.environ["SEED_KEY"] = os.environ.get("SEED_KEY") or "test-seed-key"
os.environ["SMTP_USER"] = os.environ.get("SMTP_USER") or "portal@example.com"
os.environ["SMTP_PASSWORD"] = os.environ.get("SMTP_PASSWORD") or "hunter2"
os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY") or "test-gemini-key"

from app.logging_config import configure_logging

configure_logging()

from app.main import app


@pytest.fixture(scope="session")
def test_client() -> TestClient:
    """Provide a FastAPI test client."""

    return TestClient(app)


@pytest.fixture
def dependency_overrides() -> Iterator[Dict[Any, Any]]:
    """Expose app.dependency_overrides and reset it after the test."""

    yield app.dependency_overrides
    app.dependency_overrides.clear()


class FakeDocumentReference:
    def __init__(self, store: Dict[str, Dict[str, Any]], doc_id: str) -> None:
        self._store = store
        self.id = doc_id

    def delete(self) -> None:
        self._store.pop(self.id, None)


class FakeSnapshot:
    def __init__(self, reference: FakeDocumentReference) -> None:
        self.reference = reference
        self.id = reference.id


class FakeCollection:
    def __init__(self, ids: Iterator[int]) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self._ids = ids

    def stream(self) -> Iterator[FakeSnapshot]:
        for doc_id in list(self.documents):
            yield FakeSnapshot(FakeDocumentReference(self.documents, doc_id))

    def add(self, data: Dict[str, Any]):
        doc_id = f"doc{next(self._ids)}"
        self.documents[doc_id] = dict(data)
        return None, FakeDocumentReference(self.documents, doc_id)


class FakeFirestore:
    """In-memory stand-in for google.cloud.firestore.Client."""

    def __init__(self) -> None:
        self._ids = count(1)
        self.collections: Dict[str, FakeCollection] = {}

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(self._ids))


@pytest.fixture
def fake_firestore() -> FakeFirestore:
    """Return an empty in-memory Firestore client."""

    return FakeFirestore()
