#!/usr/bin/env python
from sdk.pyproducts import ProductClient

def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")

    # -----------------------------
    # Seed catalog
    # -----------------------------
    print("Listing seeded products...")
    print(c.list_products())

    print("\nStats...")
    print(c.stats())

    # -----------------------------
    # Create
    # -----------------------------
    print("\nCreating a product...")
    desk = c.create_product("Desk", 150, category="furniture", inStock=True, color="oak")
    print(desk)

    # -----------------------------
    # Filter, paginate, search
    # -----------------------------
    print("\nElectronics, one per page, page 2...")
    print(c.list_products(category="Electronics", page=2, limit=1))

    print("\nSearching for 'phone'...")
    print(c.search_products("phone"))

    # -----------------------------
    # Update and delete
    # -----------------------------
    print("\nRepricing the desk...")
    print(c.update_product(desk["id"], "Desk", 120))

    print("\nDeleting the desk...")
    print(c.delete_product(desk["id"]))

    print("\nStats after delete...")
    print(c.stats())

if __name__ == "__main__":
    main()
