# tests/conftest.py
import pytest
import requests
from requests.structures import CaseInsensitiveDict
from fastapi.testclient import TestClient

from app.database import ProductStore
from app.main import create_app

AUTH = {"x-api-key": "secret123"}


@pytest.fixture
def store():
    return ProductStore.seeded()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


class ASGISessionAdapter(requests.adapters.BaseAdapter):
    """Routes a requests.Session into a TestClient instead of the network."""

    def __init__(self, test_client: TestClient):
        super().__init__()
        self.test_client = test_client

    def send(self, request, **kwargs):
        r = self.test_client.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.body,
        )
        resp = requests.Response()
        resp.status_code = r.status_code
        resp.headers = CaseInsensitiveDict(r.headers)
        resp._content = r.content
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass
