"""
Shared fixtures for the genealogy server test suite.
"""

import os
from pathlib import Path

import pytest

from genealogy.modules.accounts import Account
from genealogy.modules.custom import CustomModule
from genealogy.modules.individuals import Individual, Tree

THEME_CSS = b"body { color: #333; }\n"
BANNER_PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class ThemeModule(CustomModule):
    """A custom module serving files from a test resource folder."""

    def __init__(self, resource_root: Path, name: str = "theme") -> None:
        super().__init__(name)
        self._resource_root = resource_root

    def title(self) -> str:
        return "Test theme"

    def custom_module_author_name(self) -> str:
        return "Jane Doe"

    def custom_module_version(self) -> str:
        return "1.2.3"

    def custom_module_support_url(self) -> str:
        return "https://example.com/theme/issues"

    def custom_translations(self, language: str) -> dict[str, str]:
        if language == "en-US":
            return {"Add a child to create a one-parent family": "Add a son or daughter"}
        return {}

    def stylesheets(self) -> list[str]:
        return ["css/theme.css"]

    def resource_folder(self) -> str:
        return str(self._resource_root) + os.sep


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    root = tmp_path / "resources"
    (root / "css").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "css" / "theme.css").write_bytes(THEME_CSS)
    (root / "img" / "banner.png").write_bytes(BANNER_PNG)
    (root / "data.bin").write_bytes(b"\x00\x01\x02")
    return root


@pytest.fixture
def resource_folder(resource_root: Path) -> str:
    return str(resource_root) + os.sep


@pytest.fixture
def theme_module(resource_root: Path) -> ThemeModule:
    return ThemeModule(resource_root)


@pytest.fixture
def tree() -> Tree:
    return Tree(id=1, name="demo", title="Demo family tree")


@pytest.fixture
def individual() -> Individual:
    return Individual(id=10, tree_id=1, xref="I1", full_name="John Smith", sex="M")


def make_account(role: str = "editor", is_active: bool = True) -> Account:
    return Account(
        id=f"account-{role}",
        username=role,
        role=role,
        is_active=is_active,
        password_hash="unused",
    )
