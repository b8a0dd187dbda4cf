# app/handlers.py
import uuid
from typing import Optional, Dict, Any, List

from .core import page_window, has_required_fields
from .database import ProductStore
from .errors import NotFoundError, RequestRejected, ValidationError
from .models import Product

# This file contains the core logic for all product endpoints.


def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    products = store.list()
    if category:
        wanted = category.lower()
        products = [p for p in products if p.category is not None and p.category.lower() == wanted]

    page_num, limit_num, start, end = page_window(page, limit, len(products))
    return {
        "page": page_num,
        "limit": limit_num,
        "total": len(products),
        "products": [p.to_dict() for p in products[start:end]],
    }


def search_products_logic(store: ProductStore, name: Optional[str]) -> List[Dict[str, Any]]:
    if not name:
        raise RequestRejected(400, "Please provide a name to search")
    term = name.lower()
    return [p.to_dict() for p in store.list() if term in p.name.lower()]


def stats_logic(store: ProductStore) -> Dict[str, Any]:
    products = store.list()
    counts: Dict[str, int] = {}
    for p in products:
        if p.category is None:
            continue
        counts[p.category] = counts.get(p.category, 0) + 1
    return {"totalProducts": len(products), "countByCategory": counts}


def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.get(product_id)
    if p is None:
        raise NotFoundError("Product not found")
    return p.to_dict()


def create_product_logic(store: ProductStore, body: Dict[str, Any]) -> Dict[str, Any]:
    if not has_required_fields(body):
        raise ValidationError("Name and price are required")
    product = Product.from_payload({**body, "id": str(uuid.uuid4())})
    return store.insert(product).to_dict()


def update_product_logic(store: ProductStore, product_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    # a body "id" replaces the stored id
    updated = store.replace(product_id, body)
    if updated is None:
        raise NotFoundError("Product not found")
    return updated.to_dict()


def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    removed = store.remove(product_id)
    if removed is None:
        raise NotFoundError("Product not found")
    return {"message": "Product deleted", "deletedProduct": [removed.to_dict()]}
