import pytest
from fastapi.testclient import TestClient

from hello_workers.greeter.main import app


@pytest.fixture
def greeter():
    with TestClient(app) as c:
        yield c


@pytest.mark.parametrize("path", ["/", "/worker/1", "/worker/abc"])
def test_greets(greeter, path):
    r = greeter.get(path)
    assert r.status_code == 200
    assert r.text == "Hello, World!"


def test_no_health_endpoint(greeter):
    assert greeter.get("/health").status_code == 404


def test_trailing_slash_is_not_redirected(greeter):
    assert greeter.get("/worker/1/", follow_redirects=False).status_code == 404
