"""
tests/conftest.py

Shared fixtures: sample worker records, in-memory repositories, and an
async HTTP client wired to the app with the repository dependency overridden.
"""
import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any, Dict, List

os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "gigconnect-tests" / "app.log"))
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/gigconnect-test")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from main import app
from gigconnect.api.dependencies import get_worker_repository
from tests.fakes import FakeWorkerRepository


@pytest.fixture
def sample_workers() -> List[Dict[str, Any]]:
    return [
        {"name": "Joan Carter", "city": "austin", "skills": ["plumbing", "tiling"],
         "experience": 8, "ratings": 4.5, "distance": 2, "contact": "555-0001", "isVerified": False},
        {"name": "Mike Jones", "city": " Austin ", "skills": ["house painting"],
         "experience": 3, "ratings": 3, "distance": 5, "contact": "555-0002", "isVerified": True},
        {"name": "Priya Nair", "city": "dallas", "skills": ["electrical", "painting"],
         "experience": 12, "ratings": 5, "distance": 11, "isVerified": False},
        {"name": "Sam Lee", "city": "axb", "skills": ["gardening"],
         "experience": 1, "ratings": 0, "distance": 0, "isVerified": False},
        {"name": "Ana Cruz", "city": "a.b", "skills": ["cleaning"],
         "experience": 4, "ratings": 2, "distance": 1, "isVerified": False},
    ]


@pytest.fixture
def fake_repo(sample_workers) -> FakeWorkerRepository:
    return FakeWorkerRepository(sample_workers)


@pytest.fixture
def empty_repo() -> FakeWorkerRepository:
    return FakeWorkerRepository()


@pytest.fixture(scope="session")
def transport() -> ASGITransport:
    return ASGITransport(app=app)


@pytest_asyncio.fixture
async def async_client(transport: ASGITransport) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def use_repo():
    """Install a repository as the app's worker repository for one test."""
    def _install(repo):
        app.dependency_overrides[get_worker_repository] = lambda: repo
        return repo
    yield _install
    app.dependency_overrides.pop(get_worker_repository, None)
