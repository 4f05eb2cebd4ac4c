import os

os.environ.setdefault("DD_TRACE_ENABLED", "false")

import httpx
import pytest
from fastapi.testclient import TestClient

from config import ImageHostConfig, UploadConfig
from dependencies import get_image_host, get_key_value_store
from infrastructure import OmImageHostClient
from interfaces import KeyValueStore
from main import app


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class FakeUpstream:
    """Records requests sent to the image host and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(
            200, json={"response": {"code": 0}, "data": {"url": "http://x"}}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.response


@pytest.fixture
def upload_config():
    return UploadConfig()


@pytest.fixture
def image_host_config():
    return ImageHostConfig(upload_url="https://images.test/upload")


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def image_host(upstream, image_host_config):
    client = httpx.Client(transport=httpx.MockTransport(upstream.handler))
    yield OmImageHostClient(client, image_host_config)
    client.close()


@pytest.fixture
def client(store, image_host):
    app.dependency_overrides[get_key_value_store] = lambda: store
    app.dependency_overrides[get_image_host] = lambda: image_host
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
