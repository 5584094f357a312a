"""Static assets served by custom modules.

Assets are returned with a far-future ``Expires`` header. Clients pick up
changes because :func:`build_asset_url` embeds the file's modification
time in the URL, so a changed file gets a new URL.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from genealogy.core.urls import UrlBuilder

from .exceptions import AssetAccessDeniedError, AssetNotFoundError

MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "css": "text/css",
        "gif": "image/gif",
        "js": "application/javascript",
        "jpg": "image/jpg",
        "jpeg": "image/jpg",
        "json": "application/json",
        "png": "image/png",
        "txt": "text/plain",
    }
)

DEFAULT_MIME_TYPE = "application/octet-stream"

DEFAULT_EXPIRY_YEARS = 10


@dataclass(frozen=True, slots=True)
class AssetResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def asset_extension(asset: str) -> str:
    """Return the text after the last dot of the final path segment."""
    basename = asset.rsplit("/", 1)[-1]
    if "." not in basename:
        return ""
    return basename.rsplit(".", 1)[1]


def resolve_mime_type(asset: str) -> str:
    # Case-sensitive: "logo.PNG" falls back to the default.
    return MIME_TYPES.get(asset_extension(asset), DEFAULT_MIME_TYPE)


def add_years(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return moment.replace(year=moment.year + years, day=28)


def asset_hash(resource_root: str, asset: str) -> str:
    """Cache-busting token for an asset: its modification time in whole seconds."""
    file_path = resource_root + asset
    try:
        mtime = os.stat(file_path).st_mtime
    except OSError as exc:
        # Missing file, or a path segment that is not a directory.
        raise AssetNotFoundError(file_path) from exc
    return str(int(mtime))


def build_asset_url(url_builder: UrlBuilder, module_name: str, resource_root: str, asset: str) -> str:
    """Create a URL for an asset, e.g. ``css/theme.css`` or ``img/banner.png``."""
    return url_builder(
        "module",
        {
            "module": module_name,
            "action": "asset",
            "asset": asset,
            "hash": asset_hash(resource_root, asset),
        },
    )


def serve_asset(
    resource_root: str,
    asset: str,
    *,
    now: Optional[datetime] = None,
    expiry_years: int = DEFAULT_EXPIRY_YEARS,
) -> AssetResponse:
    """Read an asset below ``resource_root`` and build its response.

    ``asset`` comes straight from the query string. Any occurrence of
    ``..`` is rejected before the filesystem is touched.
    """
    if ".." in asset:
        raise AssetAccessDeniedError(asset)

    file_path = Path(resource_root + asset)
    if not file_path.is_file():
        raise AssetNotFoundError(str(file_path))

    content = file_path.read_bytes()
    expires = add_years(now or datetime.now(timezone.utc), expiry_years)

    return AssetResponse(
        status=200,
        headers={
            "Content-Type": resolve_mime_type(asset),
            "Expires": format_datetime(expires.astimezone(timezone.utc), usegmt=True),
        },
        body=content,
    )


__all__ = [
    "AssetResponse",
    "DEFAULT_EXPIRY_YEARS",
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
    "add_years",
    "asset_extension",
    "asset_hash",
    "build_asset_url",
    "resolve_mime_type",
    "serve_asset",
]
