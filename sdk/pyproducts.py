# sdk/pyproducts.py
import requests
import httpx
from typing import Optional, Any, Dict, List

DEFAULT_API_KEY = "secret123"


class ProductClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        api_key: str = DEFAULT_API_KEY,
        timeout: int = 10,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.async_transport = async_transport
        self.session = requests.Session()
        self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str = "") -> str:
        return f"{self.base_url}/api/products{path}"

    # Products
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url(), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, name: str) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/search"), params={"name": name}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def stats(self) -> Dict[str, Any]:
        r = self.session.get(self._url("/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, **fields: Any) -> Dict[str, Any]:
        r = self.session.post(self._url(), json={"name": name, "price": price, **fields}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: str, price: float, **fields: Any) -> Dict[str, Any]:
        r = self.session.put(self._url(f"/{product_id}"), json={"name": name, "price": price, **fields}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(self._url(f"/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, price: float, **fields: Any) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers={"x-api-key": self.api_key},
            transport=self.async_transport,
        ) as client:
            r = await client.post(self._url(), json={"name": name, "price": price, **fields})
            r.raise_for_status()
            return r.json()


if __name__ == "__main__":
    import argparse
    from rich import print

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default="http://localhost:3000")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    sp = subparsers.add_parser("search", help="Search for products by name")
    sp.add_argument("--name", required=True, help="Product name to search")

    subparsers.add_parser("stats", help="Product counts by category")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products(args.category, args.page, args.limit))
    elif args.command == "search":
        print(c.search_products(args.name))
    elif args.command == "stats":
        print(c.stats())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        extra = {"category": args.category} if args.category else {}
        print(c.create_product(args.name, args.price, **extra))
    elif args.command == "delete-product":
        print(c.delete_product(args.product_id))
