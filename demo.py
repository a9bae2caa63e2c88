#!/usr/bin/env python
from storefront_sdk.client import StoreClient


def main():
    c = StoreClient()

    print("Listing products...")
    for p in c.list_products():
        print(f"  {p['id']:>3}  {p['name']}  ({p['price']})")

    print("\nSearching descriptions for 'normal'...")
    print(c.search_products("normal"))

    print("\nListing brands...")
    brands = c.list_brands()
    print(brands)

    if brands:
        first = brands[0]
        print(f"\nProducts for brand {first['name']}...")
        print(c.brand_products(first["id"]))

    print("\nLogging in as greenlion235...")
    print(c.login("greenlion235", "waters"))

    print("\nViewing cart (stub)...")
    print(c.view_cart())


if __name__ == "__main__":
    main()
