"""
Custom module defaults, the module registry and action lookup.
"""

import os

import pytest

from genealogy.core.i18n import Translator
from genealogy.modules.custom import (
    CustomModule,
    CustomModuleNotFoundError,
    ModuleActionNotFoundError,
    ModuleRegistry,
    resolve_action,
)

from .conftest import THEME_CSS, ThemeModule


class TestDefaults:

    def test_metadata_defaults_are_empty(self):
        module = CustomModule("plain")
        assert module.name == "plain"
        assert module.title() == "plain"
        assert module.custom_module_author_name() == ""
        assert module.custom_module_version() == ""
        assert module.custom_module_latest_version_url() == ""
        assert module.custom_module_support_url() == ""

    def test_no_translation_overrides_by_default(self):
        assert CustomModule("plain").custom_translations("fr") == {}

    def test_resource_folder_ends_with_separator(self):
        assert CustomModule("plain").resource_folder().endswith(os.sep)

    def test_overrides(self, theme_module):
        assert theme_module.custom_module_version() == "1.2.3"
        assert theme_module.custom_module_author_name() == "Jane Doe"


class TestModuleActions:

    def test_get_asset_action(self, theme_module):
        response = theme_module.get_asset_action({"asset": "css/theme.css"})
        assert response.status == 200
        assert response.body == THEME_CSS

    def test_get_asset_action_without_asset(self, theme_module):
        from genealogy.modules.custom import AssetNotFoundError

        with pytest.raises(AssetNotFoundError):
            theme_module.get_asset_action({})

    def test_asset_url(self, theme_module, resource_root):
        os.utime(resource_root / "css" / "theme.css", (1700000000, 1700000000))
        calls = []

        def url_builder(route_name, params):
            calls.append((route_name, dict(params)))
            return "url"

        assert theme_module.asset_url("css/theme.css", url_builder) == "url"
        assert calls == [
            (
                "module",
                {"module": "theme", "action": "asset", "asset": "css/theme.css", "hash": "1700000000"},
            )
        ]


class TestRegistry:

    def test_register_and_get(self, theme_module):
        registry = ModuleRegistry()
        registry.register(theme_module)
        assert registry.get("theme") is theme_module
        assert "theme" in registry
        assert len(registry) == 1

    def test_duplicate_name_rejected(self, resource_root):
        registry = ModuleRegistry()
        registry.register(ThemeModule(resource_root))
        with pytest.raises(ValueError):
            registry.register(ThemeModule(resource_root))

    def test_unknown_module(self):
        with pytest.raises(CustomModuleNotFoundError):
            ModuleRegistry().get("missing")

    def test_modules_sorted_by_name(self, resource_root):
        registry = ModuleRegistry()
        registry.register(ThemeModule(resource_root, name="zeta"))
        registry.register(ThemeModule(resource_root, name="alpha"))
        assert [module.name for module in registry.modules()] == ["alpha", "zeta"]

    def test_apply_translations(self, theme_module):
        registry = ModuleRegistry()
        registry.register(theme_module)

        english = Translator("en-US")
        registry.apply_translations(english)
        assert english.translate("Add a child to create a one-parent family") == "Add a son or daughter"

        french = Translator("fr")
        registry.apply_translations(french)
        assert french.overrides == {}


class TestResolveAction:

    def test_get_asset(self, theme_module):
        handler = resolve_action(theme_module, "GET", "asset")
        assert handler == theme_module.get_asset_action

    @pytest.mark.parametrize("verb, action", [("POST", "asset"), ("GET", "missing"), ("GET", "asset-x"), ("GET", "")])
    def test_unknown_action(self, theme_module, verb, action):
        with pytest.raises(ModuleActionNotFoundError):
            resolve_action(theme_module, verb, action)


class TestStylesheets:

    def test_no_stylesheets_by_default(self):
        assert CustomModule("plain").stylesheets() == []

    def test_urls_in_module_name_order(self, resource_root):
        registry = ModuleRegistry()
        registry.register(ThemeModule(resource_root, name="zeta"))
        registry.register(ThemeModule(resource_root, name="alpha"))

        urls = registry.stylesheet_urls(lambda route_name, params: f"{params['module']}:{params['asset']}")

        assert urls == ["alpha:css/theme.css", "zeta:css/theme.css"]

    def test_missing_stylesheet_skipped(self, resource_root):
        (resource_root / "css" / "theme.css").unlink()
        registry = ModuleRegistry()
        registry.register(ThemeModule(resource_root))

        assert registry.stylesheet_urls(lambda route_name, params: "url") == []
