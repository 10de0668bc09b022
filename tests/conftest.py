import os

os.environ.setdefault("DB_DSN", "sqlite://")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.pop("API_KEY", None)

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from wingo.db.base import init_db
from wingo.sources import LatestDraw


class FakeSource:
    """Hands out queued draws; the last one repeats once the queue is drained."""

    def __init__(self, draws=()):
        self.draws = list(draws)
        self.last = None
        self.calls = 0

    def push(self, period, number, color="red"):
        self.draws.append(LatestDraw(period=period, number=number, color=color))

    def fetch_latest(self):
        self.calls += 1
        if self.draws:
            self.last = self.draws.pop(0)
        return self.last


class FakeSink:
    def __init__(self, fail=False):
        self.messages = []
        self.fail = fail

    def send(self, text):
        self.messages.append(text)
        if self.fail:
            raise ConnectionError("telegram down")


@pytest.fixture
def db_engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(eng)
    return eng


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as s:
        yield s


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def broken_sink():
    return FakeSink(fail=True)
