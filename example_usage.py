# example_usage.py - Creating test fixtures through the API

import asyncio
import logging

from apifactory import APIAdapter, APIError, APIModel, RESTAPIService

logging.basicConfig(level=logging.DEBUG)


class Product(APIModel):
    model_type = "product"
    name = ""
    regular_price = "0.00"


class Order(APIModel):
    model_type = "order"
    status = "pending"
    product_ids = ()


async def create_orders(api_service, model):
    """Orders need line items built from already-created products"""
    orders = model if isinstance(model, list) else [model]
    for order in orders:
        response = await api_service.post("/wc/v3/orders", {
            "status": order.status,
            "line_items": [{"product_id": pid, "quantity": 1} for pid in order.product_ids],
        })
        if isinstance(response, APIError):
            raise response
        order.on_created(response.data)
    return model


def build_adapter(base_url: str) -> APIAdapter:
    adapter = APIAdapter(RESTAPIService(base_url, {"timeout": 10}))
    adapter.register_model(Product, "/wc/v3/products", lambda p: {
        "name": p.name,
        "regular_price": p.regular_price,
    })
    adapter.register_model_callback(Order, create_orders)
    adapter.freeze()
    return adapter


async def main():
    adapter = build_adapter("http://localhost:8084/wp-json")

    try:
        products = await adapter.create([
            Product(name="Widget", regular_price="9.99"),
            Product(name="Gadget", regular_price="19.99"),
        ])
        print(f"✅ Created products: {[p.id for p in products]}")

        order = await adapter.create(Order(product_ids=[p.id for p in products]))
        print(f"✅ Created order: {order.id}")
    finally:
        adapter.api_service.close()


if __name__ == "__main__":
    asyncio.run(main())
