import logging
import os
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from currency import format_price
from schemas import (
    Collection,
    CollectionWithProducts,
    Customer,
    CustomerCreate,
    Order,
    OrderCreate,
    Page,
    Product,
    ProductQuery,
)
from store import MockStore, NotFoundError, VariantNotFoundError, order_ids_from_env

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mock Storefront API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.store = MockStore(order_ids=order_ids_from_env())
logger.info(
    "Loaded %d products and %d collections",
    len(app.state.store.products),
    len(app.state.store.collections),
)


def get_store(request: Request) -> MockStore:
    return request.app.state.store


@app.get("/")
def read_root():
    return {"brand": "Mock Storefront", "message": "Backend running"}


@app.get("/test")
def test_store(store: MockStore = Depends(get_store)):
    return {
        "backend": "✅ Running",
        "store": "✅ In-memory & Working",
        "order_ids": type(store.order_ids).__name__,
        "tables": {
            "products": len(store.products),
            "collections": len(store.collections),
            "orders": len(store.orders),
        },
    }


# ----------------------------- Products -----------------------------

@app.get("/api/products", response_model=Page[Product])
def list_products(
    collection_id: Optional[str] = Query(None, alias="collectionId"),
    ids: Optional[List[str]] = Query(None),
    sort: Optional[Literal["price", "name"]] = None,
    order: Optional[Literal["asc", "desc"]] = None,
    store: MockStore = Depends(get_store),
):
    # ?ids=a&ids=b and ?ids=a,b are both accepted
    if ids:
        ids = [i.strip() for chunk in ids for i in chunk.split(",") if i.strip()]
    query = ProductQuery(collection_id=collection_id, ids=ids or None, sort=sort, order=order)
    return store.get_products(query).data


@app.get("/api/products/{product_id}", response_model=Product)
def get_product(product_id: str, store: MockStore = Depends(get_store)):
    result = store.get_product(product_id)
    if result.error:
        raise HTTPException(status_code=404, detail=result.error.error)
    return result.data


# ----------------------------- Collections -----------------------------

@app.get("/api/collections", response_model=Page[Collection])
def list_collections(store: MockStore = Depends(get_store)):
    return store.get_collections().data


@app.get("/api/collections/{collection_id}", response_model=CollectionWithProducts)
def get_collection(collection_id: str, store: MockStore = Depends(get_store)):
    result = store.get_collection(collection_id)
    if result.error:
        raise HTTPException(status_code=404, detail=result.error.error)
    return result.data


# ----------------------------- Customers -----------------------------

@app.post("/api/customers", response_model=Customer, status_code=201)
def create_customer(payload: CustomerCreate, store: MockStore = Depends(get_store)):
    return store.create_customer(payload).data


# ----------------------------- Orders -----------------------------

@app.post("/api/orders", response_model=Order, status_code=201)
def create_order(payload: OrderCreate, store: MockStore = Depends(get_store)):
    try:
        result = store.create_order(payload)
    except VariantNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.data


@app.get("/api/orders/{order_id}", response_model=Order)
def get_order(order_id: str, store: MockStore = Depends(get_store)):
    try:
        return store.get_order(order_id, throw_on_error=True).data
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.error.error)


# ----------------------------- Currency -----------------------------

@app.get("/api/format-price")
def get_formatted_price(value: int):
    return {"value": value, "formatted": format_price(value)}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
