import asyncio
import httpx
from sdk.pyproducts import ProductClient

async def create(client, name, price):
    try:
        product = await client.create_product_async(name, price, category="demo")
        print(f"✅ created {name} -> {product['id']}")
        return product
    except httpx.HTTPStatusError as e:
        print(f"❌ {name} failed with status {e.response.status_code}: {e.response.text}")
    except httpx.HTTPError as e:
        print(f"❌ {name} unexpected failure: {e}")
    return None

async def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")

    print("\n⚡ Creating products concurrently...")
    results = await asyncio.gather(*(create(c, f"Widget {i}", 10 + i) for i in range(10)))

    ids = [p["id"] for p in results if p]
    print(f"\n🆔 {len(ids)} created, {len(set(ids))} unique ids")
    print("📊 Stats:", c.stats())

if __name__ == "__main__":
    asyncio.run(main())
