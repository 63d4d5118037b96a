import os
import sys
from datetime import UTC, datetime, timedelta

import pytest

# Path setup before any project imports to satisfy E402
ROOT = os.path.dirname(__file__)
PARENT = os.path.abspath(os.path.join(ROOT, ".."))
if PARENT not in sys.path:  # pragma: no cover - environment dependent
    sys.path.insert(0, PARENT)


def _lazy_imports():  # isolate app imports & satisfy lint ordering
    from todoapi.app_factory import create_app  # noqa: E402
    from todoapi.task_store import TaskStore  # noqa: E402

    return create_app, TaskStore


class FrozenClock:
    """Deterministic clock for the store; moves only when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 9, 8, 19, 5, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def store(clock):
    _, TaskStore = _lazy_imports()
    return TaskStore(base_url="http://localhost:3000", clock=clock)


@pytest.fixture
def app(store):
    create_app, _ = _lazy_imports()
    # Rate limiting has dedicated tests; keep it out of the way elsewhere
    return create_app({"TESTING": True, "rate_limit_backend": "noop"}, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_task(client):
    """Create a task through the API and return its JSON body."""

    def _make(title: str = "Minha nova task") -> dict:
        r = client.post("/tasks", json={"title": title})
        assert r.status_code == 201, r.get_json()
        return r.get_json()

    return _make
