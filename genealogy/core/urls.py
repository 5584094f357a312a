"""Route URL building, passed to components that need to link to routes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol
from urllib.parse import urlencode

from fastapi import Request


class UrlBuilder(Protocol):
    def __call__(self, route_name: str, params: Mapping[str, object]) -> str:
        ...


class RequestUrlBuilder:
    """Build absolute URLs for named routes relative to the current request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def __call__(self, route_name: str, params: Mapping[str, object]) -> str:
        url = str(self._request.url_for(route_name))
        if not params:
            return url
        return f"{url}?{urlencode(params, safe='/')}"


__all__ = ["UrlBuilder", "RequestUrlBuilder"]
