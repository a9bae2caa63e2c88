# tests/test_client.py
import pytest
from fastapi.testclient import TestClient

from storefront.main import create_app
from storefront_sdk.client import StoreClient


@pytest.fixture
def sdk(catalog):
    c = StoreClient(base_url="http://testserver/")
    # TestClient speaks the same get/post/raise_for_status surface as a requests.Session
    c.session = TestClient(create_app(catalog))
    return c


def test_sdk_lists_and_searches(sdk):
    assert len(sdk.list_products()) == 9
    assert [p["id"] for p in sdk.search_products("normal")] == ["5"]
    assert [b["name"] for b in sdk.list_brands()][:2] == ["Oakley", "Ray Ban"]
    assert [p["id"] for p in sdk.brand_products("2")] == ["4", "5"]


def test_sdk_login_sets_bearer_header(sdk):
    body = sdk.login("greenlion235", "waters")
    assert sdk.token == body["token"]
    assert sdk.session.headers["Authorization"] == f"Bearer {body['token']}"


def test_sdk_view_cart_stub(sdk):
    assert sdk.view_cart() is None
