"""
Seed data loader.

Reads products.json, brands.json and users.json from a directory and bulk-adds
them to a Catalog. Records are validated through the entity models, so a
product whose categoryId is not a string fails here instead of silently
never matching its brand.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .database import Catalog
from .models import Brand, Product, User

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

PRODUCTS_FILE = "products.json"
BRANDS_FILE = "brands.json"
USERS_FILE = "users.json"


class FixtureError(ValueError):
    def __init__(self, path: Path, error: ValidationError):
        self.path = path
        self.error = error
        super().__init__(f"invalid fixture data in {path}: {error}")


def read_json(path: Union[str, Path]) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_records(path: Path, model: Type[M]) -> List[M]:
    data = read_json(path)
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        raise FixtureError(path, e) from e


def load_fixtures(catalog: Catalog, data_dir: Union[str, Path]) -> Catalog:
    data_dir = Path(data_dir)
    products = read_records(data_dir / PRODUCTS_FILE, Product)
    brands = read_records(data_dir / BRANDS_FILE, Brand)
    users = read_records(data_dir / USERS_FILE, User)

    catalog.load(products=products, brands=brands, users=users)
    logger.info(
        "Loaded fixtures from %s: %d products, %d brands, %d users",
        data_dir, len(products), len(brands), len(users),
    )
    return catalog
