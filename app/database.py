# app/database.py
import threading
from typing import Dict, Any, List, Optional

from .models import Product

# This file holds the in-memory product collection and its lock.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered product collection.

    Every method holds the store lock for its whole body, so lookups followed
    by a mutation (replace, remove) are never interleaved with another caller.
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls([Product.model_validate(p) for p in SEED_PRODUCTS])

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            idx = self._index_of(product_id)
            return self._products[idx] if idx != -1 else None

    def insert(self, product: Product) -> Product:
        with self._lock:
            self._products.append(product)
            return product

    def replace(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Shallow-merge ``fields`` over the stored record; None if absent."""
        with self._lock:
            idx = self._index_of(product_id)
            if idx == -1:
                return None
            merged = {**self._products[idx].to_dict(), **fields}
            updated = Product.from_payload(merged)
            self._products[idx] = updated
            return updated

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            idx = self._index_of(product_id)
            if idx == -1:
                return None
            return self._products.pop(idx)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
