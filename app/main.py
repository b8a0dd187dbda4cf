# app/main.py
from datetime import datetime, timezone
from typing import Optional, Dict, Any

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .core import is_protected_path, validate_product
from .database import ProductStore
from .errors import register_error_handlers
from .handlers import (
    list_products_logic, search_products_logic, stats_logic, get_product_logic,
    create_product_logic, update_product_logic, delete_product_logic,
)
from .log import get_logger
from .settings import API_KEY, API_KEY_HEADER, HOST, PORT, PRODUCTS_PREFIX

logger = get_logger(__name__)

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Middleware
# ---------------------------
async def log_requests(request: Request, call_next):
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    target = request.url.path
    if request.url.query:
        target += "?" + request.url.query
    logger.info("%s %s at %s", request.method, target, now)
    return await call_next(request)


async def authenticate(request: Request, call_next):
    if is_protected_path(request.url.path):
        api_key = request.headers.get(API_KEY_HEADER)
        if not api_key or api_key != API_KEY:
            return JSONResponse(status_code=401, content={"message": "Unauthorized: Invalid or missing API key"})
    return await call_next(request)


# ---------------------------
# Product endpoints
# ---------------------------
router = APIRouter(prefix=PRODUCTS_PREFIX, tags=["products"])


@router.get("")
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return list_products_logic(store, category, page, limit)


# search and stats must be registered before /{product_id}
@router.get("/search")
async def search_products(name: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return search_products_logic(store, name)


@router.get("/stats")
async def product_stats(store: ProductStore = Depends(get_store)):
    return stats_logic(store)


@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return get_product_logic(store, product_id)


@router.post("", status_code=201)
async def create_product(
    body: Dict[str, Any] = Depends(validate_product),
    store: ProductStore = Depends(get_store),
):
    return create_product_logic(store, body)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    body: Dict[str, Any] = Depends(validate_product),
    store: ProductStore = Depends(get_store),
):
    return update_product_logic(store, product_id, body)


@router.delete("/{product_id}")
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return delete_product_logic(store, product_id)


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    app = FastAPI(title="Product API (in-memory)")
    app.state.store = store if store is not None else ProductStore.seeded()

    # the last middleware added runs first: logging wraps authentication
    app.middleware("http")(authenticate)
    app.middleware("http")(log_requests)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME

    app.include_router(router)
    register_error_handlers(app)
    return app


app = create_app()


def main() -> None:
    logger.info("Server is running on http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
