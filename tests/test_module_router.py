"""
The /module route: dispatching custom module actions over HTTP.
"""

import os

import pytest
from fastapi.testclient import TestClient

from genealogy.core.security import get_optional_account
from genealogy.interfaces.http.deps import get_individual_factory
from genealogy.main import create_app

from .conftest import THEME_CSS, ThemeModule, make_account
from .fakes import individual_factory

PAGE_URL = "/tree/demo/add-child-to-individual"


@pytest.fixture
def client(resource_root, tree, individual):
    app = create_app([ThemeModule(resource_root)])
    app.dependency_overrides[get_individual_factory] = lambda: individual_factory([tree], [individual])
    app.dependency_overrides[get_optional_account] = lambda: make_account("editor")
    return TestClient(app)


def test_serves_asset(client):
    response = client.get("/module", params={"module": "theme", "action": "asset", "asset": "css/theme.css"})
    assert response.status_code == 200
    assert response.content == THEME_CSS
    assert response.headers["content-type"] == "text/css"
    assert response.headers["expires"].endswith("GMT")


def test_traversal_is_forbidden(client):
    response = client.get("/module", params={"module": "theme", "action": "asset", "asset": "../../etc/passwd"})
    assert response.status_code == 403


def test_missing_asset(client):
    response = client.get("/module", params={"module": "theme", "action": "asset", "asset": "css/none.css"})
    assert response.status_code == 404


def test_unknown_module(client):
    response = client.get("/module", params={"module": "nope", "action": "asset", "asset": "css/theme.css"})
    assert response.status_code == 404


def test_unknown_action(client):
    response = client.get("/module", params={"module": "theme", "action": "delete", "asset": "css/theme.css"})
    assert response.status_code == 404


def test_post_has_no_asset_action(client):
    response = client.post("/module", params={"module": "theme", "action": "asset", "asset": "css/theme.css"})
    assert response.status_code == 404


def test_pages_link_module_stylesheets(client, resource_root):
    os.utime(resource_root / "css" / "theme.css", (1700000000, 1700000000))

    response = client.get(PAGE_URL, params={"xref": "I1"})

    assert response.context["stylesheets"] == [
        "http://testserver/module?module=theme&action=asset&asset=css/theme.css&hash=1700000000"
    ]
    assert (
        '<link rel="stylesheet" '
        'href="http://testserver/module?module=theme&amp;action=asset&amp;asset=css/theme.css&amp;hash=1700000000">'
    ) in response.text


def test_stylesheet_hash_follows_file_changes(client, resource_root):
    target = resource_root / "css" / "theme.css"
    os.utime(target, (1700000000, 1700000000))
    before = client.get(PAGE_URL, params={"xref": "I1"}).context["stylesheets"]

    os.utime(target, (1700000500, 1700000500))
    after = client.get(PAGE_URL, params={"xref": "I1"}).context["stylesheets"]

    assert before[0].endswith("hash=1700000000")
    assert after[0].endswith("hash=1700000500")


def test_linked_stylesheet_is_served(client):
    url = client.get(PAGE_URL, params={"xref": "I1"}).context["stylesheets"][0]

    response = client.get(url)

    assert response.status_code == 200
    assert response.content == THEME_CSS


def test_missing_stylesheet_is_left_out(client, resource_root):
    (resource_root / "css" / "theme.css").unlink()

    response = client.get(PAGE_URL, params={"xref": "I1"})

    assert response.status_code == 200
    assert response.context["stylesheets"] == []
