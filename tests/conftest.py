from datetime import date

import pytest
from fastapi.testclient import TestClient

from people_api.app.core.config import Settings
from people_api.app.core.store import PersonStore
from people_api.app.main import create_app
from people_api.app.services.person_service import PersonService

TODAY = date(2023, 2, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def store() -> PersonStore:
    return PersonStore()


@pytest.fixture
def service(store, clock) -> PersonService:
    return PersonService(store, clock)


@pytest.fixture
def app(store, clock):
    return create_app(Settings(api_prefix="", seed_sample_data=True), store=store, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
