"""Shared fixtures: a transport that records calls instead of hitting the network."""

from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from wunderlist.api.client import EndpointCallResult
from wunderlist.config import Configurator

CLIENT_ID = "client-123"
TOKEN = "token-abc"


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: Mapping[str, str]
    body: Mapping[str, Any] | None = None


@dataclass
class FakeTransport:
    calls: list[RecordedCall] = field(default_factory=list)
    status_code: int = 200
    json_body: Any | None = None
    closed: bool = False

    def close(self):
        self.closed = True

    def _resolve(self, call: RecordedCall) -> Future:
        self.calls.append(call)
        future: Future = Future()
        future.set_result(
            EndpointCallResult(
                method=call.method,
                url=call.url,
                request_headers=call.headers,
                status_code=self.status_code,
                elapsed=0.0,
                text="",
                json=self.json_body,
            )
        )
        return future

    def get_request(self, url, headers):
        return self._resolve(RecordedCall("GET", url, headers))

    def post_request(self, url, body, headers):
        return self._resolve(RecordedCall("POST", url, headers, body))

    def patch_request(self, url, body, headers):
        return self._resolve(RecordedCall("PATCH", url, headers, body))

    def delete_request(self, url, headers):
        return self._resolve(RecordedCall("DELETE", url, headers))

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def configurator() -> Configurator:
    return Configurator(client_id=CLIENT_ID, auth_token=TOKEN)


@pytest.fixture
def headers(configurator) -> dict[str, str]:
    return configurator.get_config()


@pytest.fixture
def make_endpoint(transport, headers):
    """Build an endpoint of the given type wired to the fake transport."""

    def _make(endpoint_cls, name):
        return endpoint_cls(name, transport=transport, headers=headers)

    return _make
