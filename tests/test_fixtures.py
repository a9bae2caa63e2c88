# tests/test_fixtures.py
import json

import pytest
from fastapi.testclient import TestClient

from storefront.database import Catalog
from storefront.fixtures import FixtureError, load_fixtures
from storefront.main import create_app


def _write(dirpath, products=None, brands=None, users=None):
    (dirpath / "products.json").write_text(json.dumps(products or []), encoding="utf-8")
    (dirpath / "brands.json").write_text(json.dumps(brands or []), encoding="utf-8")
    (dirpath / "users.json").write_text(json.dumps(users or []), encoding="utf-8")


def test_fixture_ids_match_assigned_ids(catalog, fixture_products):
    assert [p.id for p in catalog.products.get_all()] == [p["id"] for p in fixture_products]


def test_user_profile_fields_are_kept(catalog):
    user = catalog.users.get_all()[1]
    assert user.login.username == "greenlion235"
    assert user.model_extra["email"] == "salvador.jordan@example.com"


def test_numeric_category_id_is_rejected(tmp_path):
    _write(tmp_path, products=[{
        "id": "1", "categoryId": 2, "name": "x", "description": "y", "price": 1, "imageUrls": [],
    }])
    with pytest.raises(FixtureError) as exc:
        load_fixtures(Catalog(), tmp_path)
    assert "products.json" in str(exc.value)


def test_non_list_fixture_is_rejected(tmp_path):
    _write(tmp_path)
    (tmp_path / "brands.json").write_text(json.dumps({"name": "solo"}), encoding="utf-8")
    with pytest.raises(FixtureError):
        load_fixtures(Catalog(), tmp_path)


def test_user_without_login_is_rejected(tmp_path):
    _write(tmp_path, users=[{"email": "a@example.com"}])
    with pytest.raises(FixtureError):
        load_fixtures(Catalog(), tmp_path)


def test_missing_fixture_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_fixtures(Catalog(), tmp_path)


def test_app_seeds_itself_on_startup(data_dir, fixture_brands):
    app = create_app(data_dir=data_dir)
    with TestClient(app) as client:
        assert client.get("/v1/brands").json() == fixture_brands
        assert len(app.state.catalog.products) == 9


def test_injected_catalog_is_not_reseeded(catalog):
    with TestClient(create_app(catalog)) as client:
        assert len(client.get("/v1/products").json()) == 9
