"""Fluent request construction producing immutable Request descriptors."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import quote

from config import Settings, get_settings
from errors import UnresolvedPlaceholder

PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


class ContentType(str, Enum):
    ANY = "*/*"
    JSON = "application/json"
    XML = "application/xml"
    TEXT = "text/plain"
    HTML = "text/html"
    URLENC = "application/x-www-form-urlencoded"
    BINARY = "application/octet-stream"


def placeholders(path: str) -> list[str]:
    return PLACEHOLDER_RE.findall(path)


def copy_body(body: Any) -> Any:
    """Detach a structured body from the caller; bytes and str are already immutable."""
    if body is None or isinstance(body, (bytes, str)):
        return body
    if isinstance(body, bytearray):
        return bytes(body)
    return copy.deepcopy(body)


@dataclass(frozen=True)
class Request:
    base_url: str
    path: str
    path_params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    content_type: Optional[ContentType] = None
    body: Any = None
    log: bool = False

    def __post_init__(self):
        missing = [name for name in placeholders(self.path) if name not in self.path_params]
        if missing:
            raise UnresolvedPlaceholder(self.path, missing)
        # freeze the mappings so a built Request cannot be changed through them
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "body", copy_body(self.body))

    @property
    def resolved_path(self) -> str:
        return PLACEHOLDER_RE.sub(
            lambda m: quote(str(self.path_params[m.group(1)]), safe=""), self.path
        )

    @property
    def url(self) -> str:
        path = self.resolved_path
        if path and not path.startswith("/"):
            path = "/" + path
        return self.base_url.rstrip("/") + path


class RequestBuilder:
    """
    Accumulates request configuration. Every with_* call returns a new
    builder, so a partially configured builder can be shared and extended.
    The base URL is fixed at construction.
    """

    def __init__(self, base_url: str, path: str = "", *, _state: Optional[dict] = None):
        self._base_url = base_url
        self._path = path
        state = _state or {}
        self._path_params = dict(state.get("path_params", {}))
        self._headers = dict(state.get("headers", {}))
        self._content_type = state.get("content_type")
        self._body = state.get("body")
        self._log = state.get("log", False)

    @classmethod
    def for_path(cls, path: str, settings: Optional[Settings] = None) -> "RequestBuilder":
        settings = settings or get_settings()
        return cls(settings.base_url, path)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _copy(self, **changes) -> "RequestBuilder":
        state = {
            "path_params": self._path_params,
            "headers": self._headers,
            "content_type": self._content_type,
            "body": self._body,
            "log": self._log,
        }
        path = changes.pop("path", self._path)
        state.update(changes)
        return RequestBuilder(self._base_url, path, _state=state)

    def path(self, path: str) -> "RequestBuilder":
        return self._copy(path=path)

    def with_header(self, name: str, value: str) -> "RequestBuilder":
        headers = dict(self._headers)
        headers[name] = str(value)
        return self._copy(headers=headers)

    def with_content_type(self, content_type) -> "RequestBuilder":
        return self._copy(content_type=ContentType(content_type))

    def with_body(self, body: Any) -> "RequestBuilder":
        return self._copy(body=copy_body(body))

    def with_path_param(self, name: str, value: Any) -> "RequestBuilder":
        params = dict(self._path_params)
        params[name] = value
        return self._copy(path_params=params)

    def with_path_params(self, **params: Any) -> "RequestBuilder":
        merged = dict(self._path_params)
        merged.update(params)
        return self._copy(path_params=merged)

    def log_all(self, enabled: bool = True) -> "RequestBuilder":
        return self._copy(log=enabled)

    def build(self) -> Request:
        """Raises UnresolvedPlaceholder when a {name} in the path has no value."""
        return Request(
            base_url=self._base_url,
            path=self._path,
            path_params=self._path_params,
            headers=self._headers,
            content_type=self._content_type,
            body=self._body,
            log=self._log,
        )
