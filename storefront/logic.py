import logging
from typing import Optional, List
from fastapi import HTTPException

from .core import LoginIn, _make_token, _products_matching, _products_for_brand, _find_user
from .database import Catalog
from .models import Brand, Product, Token

logger = logging.getLogger(__name__)

# Endpoint logic. Route functions in main.py stay thin and delegate here.

# Product endpoints
def list_products_logic(catalog: Catalog, query: Optional[str] = None) -> List[Product]:
    products = catalog.products.get_all()
    if query:
        return _products_matching(products, query)
    return products

# Brand endpoints
def list_brands_logic(catalog: Catalog) -> List[Brand]:
    return catalog.brands.get_all()

def brand_products_logic(catalog: Catalog, brand_id: str) -> List[Product]:
    brand = catalog.brands.get_by_id(brand_id)
    if brand is None:
        logger.info("Brand lookup miss: %r", brand_id)
        raise HTTPException(status_code=404, detail="no brand with that id found")
    return _products_for_brand(catalog.products.get_all(), brand.id)

# Auth endpoints
def login_logic(catalog: Catalog, payload: LoginIn) -> Token:
    if not payload.username or not payload.password:
        raise HTTPException(status_code=400, detail="Must provide username and password")

    user = _find_user(catalog.users.get_all(), payload.username, payload.password)
    if user is None:
        logger.info("Failed login for username %r", payload.username)
        raise HTTPException(status_code=401, detail="username or password not found")

    token = catalog.tokens.add_one(Token(username=payload.username, token=_make_token()))
    logger.info("Issued token for %r", payload.username)
    return token
