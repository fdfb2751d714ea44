"""HTTP transport used by Wunderlist endpoints."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from threading import local
from time import perf_counter
from typing import Any, Mapping, MutableMapping, Optional, Protocol

import requests
from loguru import logger
from omegaconf import DictConfig

from wunderlist.constants import HttpMethod, Verb
from wunderlist.errors import TransportError
from wunderlist.utils import load_config


@dataclass(frozen=True, slots=True)
class TimeoutSettings:
    """Pair of connect/read timeouts for HTTP requests."""

    connect: float = 5.0
    read: float = 30.0

    def as_tuple(self) -> tuple[float, float]:
        """Return the timeout as ``(connect, read)`` tuple."""

        return (self.connect, self.read)


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """A fully validated request, ready to be handed to a transport."""

    verb: Verb
    method: HttpMethod
    url: str
    headers: Mapping[str, str]
    body: Optional[Mapping[str, Any]] = None


@dataclass(slots=True)
class EndpointCallResult:
    """Structured response metadata for a Wunderlist API call."""

    method: str
    url: str
    request_headers: Mapping[str, str]
    status_code: int
    elapsed: float
    text: str
    json: Any | None


class Transport(Protocol):
    def get_request(self, url: str, headers: Mapping[str, str]) -> Future[EndpointCallResult]:
        ...

    def post_request(
        self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]
    ) -> Future[EndpointCallResult]:
        ...

    def patch_request(
        self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]
    ) -> Future[EndpointCallResult]:
        ...

    def delete_request(self, url: str, headers: Mapping[str, str]) -> Future[EndpointCallResult]:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Runs each call on a worker thread and hands back a future of the result."""

    def __init__(
        self,
        *,
        default_timeout: TimeoutSettings | None = None,
        max_workers: int = 4,
    ) -> None:
        self._session_local = local()
        self._timeout = default_timeout or TimeoutSettings()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="wunderlist")

    @classmethod
    def from_config(cls, config: DictConfig | None = None) -> "RequestsTransport":
        """Build a transport from the ``transport`` hydra config (or an already composed one)."""

        config = config if config is not None else load_config("transport")
        timeout = TimeoutSettings(
            connect=float(config.timeout.connect),
            read=float(config.timeout.read),
        )
        return cls(default_timeout=timeout, max_workers=int(config.max_workers))

    def get_request(self, url: str, headers: Mapping[str, str]) -> Future[EndpointCallResult]:
        return self._submit(HttpMethod.GET, url, headers)

    def post_request(
        self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]
    ) -> Future[EndpointCallResult]:
        return self._submit(HttpMethod.POST, url, headers, body)

    def patch_request(
        self, url: str, body: Mapping[str, Any], headers: Mapping[str, str]
    ) -> Future[EndpointCallResult]:
        return self._submit(HttpMethod.PATCH, url, headers, body)

    def delete_request(self, url: str, headers: Mapping[str, str]) -> Future[EndpointCallResult]:
        return self._submit(HttpMethod.DELETE, url, headers)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def _submit(
        self,
        method: HttpMethod,
        url: str,
        headers: Mapping[str, str],
        body: Optional[Mapping[str, Any]] = None,
    ) -> Future[EndpointCallResult]:
        return self._executor.submit(self._do_request, method, url, self._build_headers(headers), body)

    def _do_request(
        self,
        method: HttpMethod,
        url: str,
        headers: Mapping[str, str],
        body: Optional[Mapping[str, Any]],
    ) -> EndpointCallResult:
        start = perf_counter()
        logger.debug("Calling Wunderlist endpoint", method=method, url=url)
        try:
            response = self._get_session().request(
                method=method.value,
                url=url,
                headers=headers,
                json=body,
                timeout=self._timeout.as_tuple(),
            )
        except requests.Timeout as exc:
            logger.warning("Request timeout", method=method, url=url, timeout=self._timeout.as_tuple())
            raise TransportError(f"Timeout calling {method} {url}") from exc
        except requests.RequestException as exc:
            logger.error("Request error", method=method, url=url, error=str(exc))
            raise TransportError(f"HTTP error calling {method} {url}") from exc

        elapsed = perf_counter() - start
        logger.debug(
            "Received response",
            method=method,
            url=url,
            status=response.status_code,
            elapsed=f"{elapsed:.3f}s",
        )

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.error(
                "Wunderlist endpoint returned error",
                method=method,
                url=url,
                status=response.status_code,
                body=response.text,
            )
            raise TransportError(
                f"Failed calling {method} {url}: {response.status_code}",
                status_code=response.status_code,
            ) from exc

        json_payload: Any | None = None
        if response.content:
            try:
                json_payload = response.json()
            except ValueError:
                logger.warning("Response body is not JSON", method=method, url=url, body=response.text[:500])

        return EndpointCallResult(
            method=method.value,
            url=url,
            request_headers=headers,
            status_code=response.status_code,
            elapsed=elapsed,
            text=response.text,
            json=json_payload,
        )

    @staticmethod
    def _build_headers(headers: Mapping[str, str]) -> MutableMapping[str, str]:
        merged: MutableMapping[str, str] = {"Content-Type": "application/json"}
        merged.update(headers)
        return merged

    def _get_session(self) -> requests.Session:
        session = getattr(self._session_local, "session", None)
        if session is None:
            session = requests.Session()
            self._session_local.session = session
        return session
