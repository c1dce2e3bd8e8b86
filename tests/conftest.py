"""Shared fixtures: a fake ``requests.Session`` recording every call."""

import json
from typing import Any, Callable, List

import pytest

from catalog_client import CatalogClient
from gateway import HttpGateway

BASE_URL = "https://vra.local"
RESOURCES_URL = f"{BASE_URL}/catalog-service/api/consumer/resources"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        if body is None:
            self.content = b""
        elif isinstance(body, str):
            self.content = body.encode("utf-8")
        else:
            self.content = json.dumps(body).encode("utf-8")
        self.text = self.content.decode("utf-8")

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Answers requests from a queue, or with ``handler(method, url)`` when set."""

    def __init__(self):
        self.calls: List[dict] = []
        self.queue: List[Any] = []
        self.handler: Callable[[str, str], Any] = None

    def respond(self, status_code: int = 200, body: Any = None) -> "FakeSession":
        self.queue.append(FakeResponse(status_code, body))
        return self

    def fail(self, exc: Exception) -> "FakeSession":
        self.queue.append(exc)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.handler is not None:
            result = self.handler(method, url)
        else:
            result = self.queue.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def gateway(session):
    return HttpGateway(base_url=BASE_URL, token="tok", session=session)


@pytest.fixture
def client(gateway):
    return CatalogClient(gateway)


@pytest.fixture
def resource_record():
    return {
        "@type": "CatalogResource",
        "id": "5ba6b907-c254-4ddf-b23c-a1258d69a6d8",
        "name": "sy2-dop402-do402-edge-001",
        "status": "ACTIVE",
        "resourceTypeRef": {"id": "ycommerce!::!54924efa", "label": "NSXEdge"},
        "description": "Client:dop402-do402|RangeIP:Range253",
    }


@pytest.fixture
def actions_body():
    return {
        "links": [],
        "content": [
            {
                "@type": "ConsumerResourceOperation",
                "name": "Destroy Networking Project",
                "type": "ACTION",
                "id": "5c13bfd4-5cb6-47d5-bb26-2f83c74d8e35",
                "bindingId": "ycommerce!::!70732f38",
                "hasForm": True,
            },
            {
                "@type": "ConsumerResourceOperation",
                "name": "Get Network Path",
                "type": "ACTION",
                "id": "1a188d44-571b-45c3-b869-8e845ebce8e6",
                "bindingId": "ycommerce!::!40531612",
                "hasForm": True,
            },
        ],
    }


@pytest.fixture
def requests_body():
    return {
        "links": [],
        "content": [
            {
                "@type": "ResourceActionRequest",
                "id": "862390e2-66df-4eff-a905-feb5a19c655a",
                "requestNumber": 1191,
                "state": "PRE_REJECTED",
                "resourceRef": {"id": "5ba6b907-c254-4ddf-b23c-a1258d69a6d8"},
                "resourceActionRef": {"id": "5c13bfd4-5cb6-47d5-bb26-2f83c74d8e35"},
                "phase": "REJECTED",
            }
        ],
        "metadata": {"size": 1000, "totalElements": 1, "totalPages": 1, "number": 1, "offset": 0},
    }
