from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from tenacity import (
    RetryError,
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from common.exceptions import TransportFailure
from config.config import Settings
from .base import Transport, TransportResponse


logger = logging.getLogger(__name__)

_HEADERS = {
    "Accept": "application/json; charset=UTF-8",
    "Content-Type": "application/json",
    "X-Stream": "true",
}


@dataclass
class HttpTransportConfig:

    endpoint: str = "http://localhost:7474/db/data"
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: float = 30.0
    retry_attempts: int = 3

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpTransportConfig":
        return cls(
            endpoint=settings.NEO4J_REST_ENDPOINT,
            username=settings.NEO4J_USERNAME,
            password=settings.NEO4J_PASSWORD,
            timeout=settings.NEO4J_REST_TIMEOUT,
            retry_attempts=settings.NEO4J_REST_RETRY_ATTEMPTS,
        )


class HttpTransport(Transport):

    def __init__(self, config: HttpTransportConfig, *, http_transport: Optional[httpx.BaseTransport] = None) -> None:
        self._config = config
        self._endpoint = config.endpoint.rstrip("/")
        auth = None
        if config.username is not None:
            auth = httpx.BasicAuth(config.username, config.password or "")
        self._client: Optional[httpx.Client] = httpx.Client(
            headers=_HEADERS,
            auth=auth,
            timeout=httpx.Timeout(config.timeout),
            transport=http_transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def close(self) -> None:
        if self._client is None:
            return
        try:
            self._client.close()
        finally:
            self._client = None
        logger.debug("HttpTransport to %s closed", self._endpoint)

    def get(self, path: str) -> TransportResponse:
        return self._request("GET", path)

    def post(self, path: str, data: Any = None) -> TransportResponse:
        return self._request("POST", path, data)

    def delete(self, path: str) -> TransportResponse:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, data: Any = None) -> TransportResponse:
        if self._client is None:
            raise TransportFailure("Transport is closed", path=path)
        url = f"{self._endpoint}{path}"
        retrying = Retrying(
            reraise=False,
            stop=stop_after_attempt(self._config.retry_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        try:
            response = retrying(self._send, method, url, data)
        except RetryError as exc:
            cause = exc.last_attempt.exception()
            logger.error("%s %s failed after %d attempts: %s", method, path, self._config.retry_attempts, cause)
            raise TransportFailure(f"{method} {path} failed: {cause}", path=path) from cause
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise TransportFailure(f"{method} {path} failed: {exc}", path=path) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return TransportResponse(code=response.status_code, data=self._decode(response, path))

    def _send(self, method: str, url: str, data: Any) -> httpx.Response:
        if method == "POST":
            return self._client.request(method, url, json=data)
        return self._client.request(method, url)

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TransportFailure(
                f"Response body for {path} is not JSON",
                code=response.status_code,
                path=path,
                data=response.text,
            ) from exc


__all__ = [
    "HttpTransport",
    "HttpTransportConfig",
]
