"""Custom module support: metadata, translations and asset serving."""

from .assets import (
    AssetResponse,
    DEFAULT_MIME_TYPE,
    MIME_TYPES,
    asset_hash,
    build_asset_url,
    resolve_mime_type,
    serve_asset,
)
from .exceptions import (
    AssetAccessDeniedError,
    AssetError,
    AssetNotFoundError,
    CustomModuleError,
    CustomModuleNotFoundError,
    ModuleActionNotFoundError,
)
from .module import AbstractModule, CustomModule, ModuleCustomMixin
from .registry import ModuleRegistry, resolve_action

__all__ = [
    "AbstractModule",
    "AssetAccessDeniedError",
    "AssetError",
    "AssetNotFoundError",
    "AssetResponse",
    "CustomModule",
    "CustomModuleError",
    "CustomModuleNotFoundError",
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
    "ModuleActionNotFoundError",
    "ModuleCustomMixin",
    "ModuleRegistry",
    "asset_hash",
    "build_asset_url",
    "resolve_action",
    "resolve_mime_type",
    "serve_asset",
]
