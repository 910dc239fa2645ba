"""httpx-backed executor: one Request in, one Response out, exactly one attempt."""

from __future__ import annotations

import copy
import json
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from types import MappingProxyType
from typing import Any, Optional, Union
from urllib.parse import urlencode

import httpx

from config import Settings, get_settings
from errors import InvalidBody, TransportError, categorize_exception
from logging_helper import log_request, log_response, log_status
from request_builder import ContentType, Request


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @classmethod
    def parse(cls, value: Union["Method", str]) -> "Method":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method {value!r}") from None


@dataclass(frozen=True)
class Response:
    """Status, headers and raw body of one reply. Header names are stored lower-cased."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: Optional[str] = None

    def __post_init__(self):
        headers = {str(k).lower(): str(v) for k, v in (self.headers or {}).items()}
        object.__setattr__(self, "headers", MappingProxyType(headers))

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @cached_property
    def _document(self) -> Any:
        if not self.body.strip():
            return None
        try:
            return json.loads(self.body)
        except RecursionError as exc:
            raise InvalidBody("Response body is nested too deeply to parse") from exc
        except ValueError as exc:
            raise InvalidBody(f"Response body is not valid JSON: {exc}") from exc

    @property
    def parsed_body(self) -> Any:
        """
        JSON body, parsed once on first access. An empty body is None.
        Each access returns a fresh copy, so callers cannot change the Response.
        """
        document = self._document
        try:
            return copy.deepcopy(document)
        except RecursionError as exc:
            raise InvalidBody("Response body is nested too deeply to copy") from exc


def encode_body(request: Request) -> Optional[bytes]:
    body = request.body
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    if request.content_type == ContentType.URLENC and isinstance(body, Mapping):
        return urlencode(body, doseq=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def request_headers(request: Request) -> dict[str, str]:
    headers = dict(request.headers)
    content_type = request.content_type
    if content_type is None and request.body is not None and not isinstance(request.body, (bytes, bytearray, str)):
        content_type = ContentType.JSON
    if content_type is not None and not any(k.lower() == "content-type" for k in headers):
        headers["Content-Type"] = content_type.value
    return headers


class HttpExecutor:
    """
    Sends Request descriptors with an httpx.Client.

    Any HTTP status is a successful round trip. Connection, DNS and timeout
    failures raise TransportError; nothing is retried.
    """

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.BaseTransport] = None,
                 client: Optional[httpx.Client] = None):
        self.settings = settings or get_settings()
        self._client = client or httpx.Client(
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            follow_redirects=False,
            transport=transport,
        )

    def execute(self, request: Request, method: Union[Method, str] = Method.GET) -> Response:
        method = Method.parse(method)
        url = request.url
        should_log = request.log or self.settings.log_http

        if should_log:
            log_request(method.value, request)

        started = time.perf_counter()
        try:
            resp = self._client.request(
                method.value,
                url,
                headers=request_headers(request),
                content=encode_body(request),
            )
        except httpx.RequestError as e:
            category = categorize_exception(e)
            log_status("error", f"{method.value} {url} failed: ", f"{category.value} {e}")
            raise TransportError(f"{method.value} {url} failed: {e}", category=category, url=url) from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        response = Response(
            status_code=resp.status_code,
            headers=dict(resp.headers.items()),
            body=resp.content,
            url=str(resp.url),
        )
        if should_log:
            log_response(response, elapsed_ms)
        return response

    def get(self, request: Request) -> Response:
        return self.execute(request, Method.GET)

    def post(self, request: Request) -> Response:
        return self.execute(request, Method.POST)

    def put(self, request: Request) -> Response:
        return self.execute(request, Method.PUT)

    def delete(self, request: Request) -> Response:
        return self.execute(request, Method.DELETE)

    def patch(self, request: Request) -> Response:
        return self.execute(request, Method.PATCH)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
