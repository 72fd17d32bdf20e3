import pytest
from fastapi.testclient import TestClient

from hello_workers.worker.main import create_app
from hello_workers.worker.registry import WorkerRegistry


@pytest.fixture
def registry():
    return WorkerRegistry()


@pytest.fixture
def client(registry):
    with TestClient(create_app(registry)) as c:
        yield c
