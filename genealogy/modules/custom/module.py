"""Base classes for pluggable modules.

Concrete modules subclass :class:`CustomModule` and override whichever
metadata hooks they need. Every hook has a neutral default so a module
with no metadata is still valid.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from genealogy.core.config import get_settings, resolve_path
from genealogy.core.urls import UrlBuilder

from .assets import AssetResponse, build_asset_url, serve_asset


class AbstractModule:
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def title(self) -> str:
        return self._name

    def description(self) -> str:
        return ""


class ModuleCustomMixin:
    """Default behaviour for modules that are not part of the core application."""

    name: str

    def custom_module_author_name(self) -> str:
        """The person or organisation who created this module."""
        return ""

    def custom_module_version(self) -> str:
        """The version of this module, e.g. ``1.2.3``."""
        return ""

    def custom_module_latest_version_url(self) -> str:
        """A URL that will provide the latest version of this module."""
        return ""

    def custom_module_support_url(self) -> str:
        """Where to get support for this module. Perhaps a github repository?"""
        return ""

    def custom_translations(self, language: str) -> dict[str, str]:
        """Additional or updated translations for ``language``."""
        return {}

    def stylesheets(self) -> list[str]:
        """Assets in the resource folder to link from every page, e.g. ``css/theme.css``."""
        return []

    def resource_folder(self) -> str:
        """Where this module stores its resources. Always ends with a separator."""
        folder = str(resolve_path(get_settings().modules.resource_dir))
        return folder.rstrip(os.sep) + os.sep

    def asset_url(self, asset: str, url_builder: UrlBuilder) -> str:
        return build_asset_url(url_builder, self.name, self.resource_folder(), asset)

    def get_asset_action(self, params: Mapping[str, str]) -> AssetResponse:
        """Serve a CSS/JS/image file from the resource folder."""
        return serve_asset(
            self.resource_folder(),
            params.get("asset") or "",
            expiry_years=get_settings().modules.asset_expiry_years,
        )


class CustomModule(AbstractModule, ModuleCustomMixin):
    pass


__all__ = ["AbstractModule", "CustomModule", "ModuleCustomMixin"]
