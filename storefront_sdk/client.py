# storefront_sdk/client.py
import os
import requests
from typing import Optional

DEFAULT_BASE_URL = os.getenv("STOREFRONT_URL", "http://127.0.0.1:3001")


class StoreClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None

    # Products
    def list_products(self, query: Optional[str] = None):
        params = {}
        if query:
            params["query"] = query
        r = self.session.get(f"{self.base_url}/v1/products", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, query: str):
        return self.list_products(query=query)

    # Brands
    def list_brands(self):
        r = self.session.get(f"{self.base_url}/v1/brands", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def brand_products(self, brand_id: str):
        r = self.session.get(f"{self.base_url}/v1/brands/{brand_id}/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Auth
    def login(self, username: str, password: str):
        r = self.session.post(f"{self.base_url}/v1/login", json={
            "username": username, "password": password
        }, timeout=self.timeout)
        r.raise_for_status()
        body = r.json()
        self.token = body["token"]
        # sent on every later request; the server does not check it yet
        self.session.headers.update({"Authorization": f"Bearer {self.token}"})
        return body

    # Cart (server side is a stub: empty 200 responses)
    def view_cart(self):
        r = self.session.get(f"{self.base_url}/v1/me/cart", timeout=self.timeout)
        r.raise_for_status()
        return r.json() if r.content else None


if __name__ == "__main__":
    import argparse
    from rich import print

    parser = argparse.ArgumentParser(description="storefront client")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help="Base URL of the storefront API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List all products")
    lp.add_argument("--query", help="Only products whose description contains this text")

    sp = subparsers.add_parser("search", help="Search product descriptions")
    sp.add_argument("query", help="Text to look for (case-sensitive)")

    subparsers.add_parser("list-brands", help="List all brands")

    bp = subparsers.add_parser("brand-products", help="List the products of one brand")
    bp.add_argument("--brand-id", required=True, help="ID of the brand")

    li = subparsers.add_parser("login", help="Log in and print the issued token")
    li.add_argument("--username", required=True)
    li.add_argument("--password", required=True)

    args = parser.parse_args()
    c = StoreClient(base_url=args.url)

    if args.command == "list-products":
        print(c.list_products(args.query))
    elif args.command == "search":
        print(c.search_products(args.query))
    elif args.command == "list-brands":
        print(c.list_brands())
    elif args.command == "brand-products":
        print(c.brand_products(args.brand_id))
    elif args.command == "login":
        print(c.login(args.username, args.password))
