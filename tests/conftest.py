"""Shared fixtures: an app wired with an in-memory store and a sleep that never waits."""

import random

import pytest
from fastapi.testclient import TestClient

from app.repositories.user_repository import MemoryUserStore
from app.services import ActionService, DashboardService, UserService
from core.bootstrap import create_app


class RecordingSleep:
    """Stand-in for the artificial delay: records requested durations, runs hooks, returns at once."""

    def __init__(self):
        self.calls = []
        self.hooks = []

    async def __call__(self, ms):
        self.calls.append(ms)
        for hook in self.hooks:
            hook(ms)


class RecordingInvalidator:

    def __init__(self):
        self.keys = []

    def __call__(self, key):
        self.keys.append(key)
        return True


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def invalidator():
    return RecordingInvalidator()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryUserStore()


@pytest.fixture
def user_service(store, sleep):
    return UserService(store, sleep=sleep, environment="test")


@pytest.fixture
def action_service(sleep, invalidator, rng):
    return ActionService(sleep=sleep, invalidate=invalidator, rng=rng, environment="test")


@pytest.fixture
def dashboard(user_service, action_service, invalidator):
    return DashboardService(user_service, action_service, invalidate=invalidator)


@pytest.fixture
def app(store, sleep, rng):
    return create_app(store=store, sleep=sleep, rng=rng)


@pytest.fixture
def client(app):
    return TestClient(app)
