"""Registry of installed custom modules and their actions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from genealogy.core.i18n import Translator
from genealogy.core.urls import UrlBuilder

from .exceptions import AssetNotFoundError, CustomModuleNotFoundError, ModuleActionNotFoundError
from .module import CustomModule

logger = logging.getLogger(__name__)


class ModuleRegistry:
    def __init__(self) -> None:
        self._modules: dict[str, CustomModule] = {}

    def register(self, module: CustomModule) -> None:
        if module.name in self._modules:
            raise ValueError(f"Module already registered: {module.name}")
        self._modules[module.name] = module
        logger.info(
            "Registered custom module %s %s",
            module.name,
            module.custom_module_version() or "(no version)",
        )

    def get(self, name: str) -> CustomModule:
        try:
            return self._modules[name]
        except KeyError as exc:
            raise CustomModuleNotFoundError(name) from exc

    def modules(self) -> list[CustomModule]:
        return [self._modules[name] for name in sorted(self._modules)]

    def apply_translations(self, translator: Translator) -> None:
        """Merge every module's overrides for the translator's language."""
        for module in self._modules.values():
            translator.add_overrides(module.custom_translations(translator.language))

    def stylesheet_urls(self, url_builder: UrlBuilder) -> list[str]:
        """Cache-busted URLs for every module stylesheet, in module name order."""
        urls = []
        for module in self.modules():
            for asset in module.stylesheets():
                try:
                    urls.append(module.asset_url(asset, url_builder))
                except AssetNotFoundError:
                    logger.warning("Stylesheet %s of module %s is missing", asset, module.name)
        return urls

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __iter__(self) -> Iterator[CustomModule]:
        return iter(self.modules())

    def __len__(self) -> int:
        return len(self._modules)


def resolve_action(module: CustomModule, verb: str, action: str) -> Callable[..., Any]:
    """Find the handler for ``action``, e.g. ``get_asset_action`` for GET/asset."""
    if not action.isidentifier():
        raise ModuleActionNotFoundError(f"{module.name}:{action}")

    handler = getattr(module, f"{verb.lower()}_{action}_action", None)
    if not callable(handler):
        raise ModuleActionNotFoundError(f"{module.name}:{action}")
    return handler


__all__ = ["ModuleRegistry", "resolve_action"]
