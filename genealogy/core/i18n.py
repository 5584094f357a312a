"""Message translation with per-module overrides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Translator:
    """Translate interface messages for a single language.

    Messages are looked up in the overrides supplied by custom modules
    first, then in the base catalog. Unknown messages are returned as-is.
    """

    def __init__(self, language: str, catalog: Mapping[str, str] | None = None) -> None:
        self._language = language
        self._catalog = dict(catalog or {})
        self._overrides: dict[str, str] = {}

    @property
    def language(self) -> str:
        return self._language

    @property
    def overrides(self) -> Mapping[str, str]:
        return MappingProxyType(self._overrides)

    def add_overrides(self, translations: Mapping[str, str]) -> None:
        if translations:
            logger.debug("Adding %d translation overrides for %s", len(translations), self._language)
        self._overrides.update(translations)

    def translate(self, message: str, **params: object) -> str:
        text = self._overrides.get(message)
        if text is None:
            text = self._catalog.get(message, message)
        if params:
            return text.format(**params)
        return text


__all__ = ["Translator"]
