# tests/conftest.py
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storefront.database import Catalog
from storefront.fixtures import load_fixtures, read_json
from storefront.main import create_app

DATA_DIR = Path(__file__).resolve().parent.parent / "initial-data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def fixture_products():
    return read_json(DATA_DIR / "products.json")


@pytest.fixture
def fixture_brands():
    return read_json(DATA_DIR / "brands.json")


@pytest.fixture
def catalog():
    """Fresh catalog seeded from initial-data/ for every test."""
    return load_fixtures(Catalog(), DATA_DIR)


@pytest.fixture
def client(catalog):
    return TestClient(create_app(catalog))
