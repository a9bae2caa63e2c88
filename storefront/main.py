# storefront/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .core import LoginIn
from .database import Catalog
from .fixtures import load_fixtures
from .logic import brand_products_logic, list_brands_logic, list_products_logic, login_logic
from .models import Brand, Product, Token

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # seed before the first request is served
    if app.state.seed_dir is not None:
        load_fixtures(app.state.catalog, app.state.seed_dir)
    yield


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


async def _read_login(request: Request) -> LoginIn:
    # accepts JSON and form bodies; anything unparsable counts as empty
    content_type = request.headers.get("content-type", "")
    data: Any = {}
    try:
        if content_type.startswith("application/json"):
            data = await request.json()
        elif content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
            data = dict(await request.form())
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    fields: Dict[str, str] = {k: data[k] for k in ("username", "password") if isinstance(data.get(k), str)}
    return LoginIn(**fields)


def create_app(catalog: Optional[Catalog] = None, data_dir: Optional[Union[str, Path]] = None) -> FastAPI:
    """
    Build the API around a Catalog.

    Without a catalog a fresh one is created and seeded from data_dir (or the
    configured fixture directory) at startup. A catalog passed in is used as
    is; it is only seeded when data_dir is given too.
    """
    app = FastAPI(title="storefront (in-memory mock)", lifespan=lifespan)
    if catalog is None:
        catalog = Catalog()
        data_dir = data_dir if data_dir is not None else settings.data_dir
    app.state.catalog = catalog
    app.state.seed_dir = data_dir

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # errors are a bare status code, no body
    @app.exception_handler(StarletteHTTPException)
    async def empty_error_response(request: Request, exc: StarletteHTTPException):
        logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.detail)
        return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/v1/products", response_model=List[Product])
    async def list_products(query: Optional[str] = None, catalog: Catalog = Depends(get_catalog)):
        return list_products_logic(catalog, query)

    # ---------------------------
    # Brand endpoints
    # ---------------------------
    @app.get("/v1/brands", response_model=List[Brand])
    async def list_brands(catalog: Catalog = Depends(get_catalog)):
        return list_brands_logic(catalog)

    @app.get("/v1/brands/{brand_id}/products", response_model=List[Product])
    async def brand_products(brand_id: str, catalog: Catalog = Depends(get_catalog)):
        return brand_products_logic(catalog, brand_id)

    # ---------------------------
    # Login
    # ---------------------------
    @app.post("/v1/login", response_model=Token)
    async def login(request: Request, catalog: Catalog = Depends(get_catalog)):
        payload = await _read_login(request)
        return login_logic(catalog, payload)

    # ---------------------------
    # Cart (routed, no behaviour yet)
    # ---------------------------
    @app.get("/v1/me/cart")
    async def view_cart():
        return Response()

    @app.post("/v1/me/cart")
    async def add_to_cart():
        return Response()

    @app.post("/v1/me/cart/{cart_product_id}")
    async def update_cart_item(cart_product_id: str):
        return Response()

    @app.delete("/v1/me/cart/{cart_product_id}")
    async def remove_cart_item(cart_product_id: str):
        return Response()

    return app


app = create_app()


def serve():
    logger.info("Starting storefront on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
