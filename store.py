"""
In-memory storefront store.

MockStore holds the products, collections and orders tables and answers
queries with the same request/response shape a remote ecommerce API would:
every call returns a RequestResult carrying either `data` or `error`.

Not-found lookups are returned as an error, or raised as NotFoundError when
the caller passes throw_on_error=True. A missing request body or an unknown
variant id is always raised.
"""

import itertools
import logging
import os
import unicodedata
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Tuple

from bson import ObjectId

from schemas import (
    Collection,
    CollectionWithProducts,
    Customer,
    CustomerCreate,
    ErrorBody,
    LineItem,
    LineItemInput,
    Order,
    OrderCreate,
    Page,
    Product,
    ProductQuery,
    ProductVariant,
    RequestInfo,
    RequestResult,
    ResponseInfo,
    normalize_address,
)
from seed import seed_collections, seed_products

logger = logging.getLogger(__name__)

DEFAULT_CUSTOMER_ID = "customer-1"
FIXED_ORDER_ID = "dk3fd0sak3d"
FIXED_ORDER_NUMBER = 1001


# ----------------------------- Errors -----------------------------

class StoreError(Exception):
    pass


class NotFoundError(StoreError):
    def __init__(self, error: Optional[ErrorBody] = None):
        self.error = error or ErrorBody()
        super().__init__(self.error.error)


class MissingBodyError(StoreError):
    def __init__(self):
        super().__init__("No body provided")


class VariantNotFoundError(StoreError):
    def __init__(self, variant_id: str):
        self.variant_id = variant_id
        super().__init__(f"Product variant {variant_id} not found")


# ----------------------------- Order ids -----------------------------

class FixedOrderIds:
    """Every order gets the same id and number; a new order replaces the last."""

    def __init__(self, order_id: str = FIXED_ORDER_ID, number: int = FIXED_ORDER_NUMBER):
        self.order_id = order_id
        self.number = number

    def __call__(self) -> Tuple[str, int]:
        return self.order_id, self.number


class SequentialOrderIds:
    def __init__(self, start: int = FIXED_ORDER_NUMBER):
        self._numbers = itertools.count(start)

    def __call__(self) -> Tuple[str, int]:
        return str(ObjectId()), next(self._numbers)


ORDER_ID_STRATEGIES = {
    "fixed": FixedOrderIds,
    "sequential": SequentialOrderIds,
}


def order_ids_from_env() -> Callable[[], Tuple[str, int]]:
    name = os.getenv("STOREFRONT_ORDER_IDS", "fixed").strip().lower()
    if name not in ORDER_ID_STRATEGIES:
        raise ValueError(f"Unknown STOREFRONT_ORDER_IDS strategy: {name}")
    return ORDER_ID_STRATEGIES[name]()


# ----------------------------- Helpers -----------------------------

def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_result(data, method: str = "GET", url: str = "https://example.com") -> RequestResult:
    return RequestResult(data=data, request=RequestInfo(method=method, url=url))


def as_error(error: ErrorBody, method: str = "GET", url: str = "https://example.com") -> RequestResult:
    return RequestResult(
        error=error,
        request=RequestInfo(method=method, url=url),
        response=ResponseInfo(status=404),
    )


def collation_key(name: str):
    # Accent- and case-insensitive first; on ties lowercase sorts before uppercase.
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name.swapcase()


# ----------------------------- Store -----------------------------

class MockStore:
    def __init__(
        self,
        products: Optional[Dict[str, Product]] = None,
        collections: Optional[Dict[str, Collection]] = None,
        order_ids: Optional[Callable[[], Tuple[str, int]]] = None,
    ):
        now = utcnow()
        self.products = products if products is not None else seed_products(now)
        self.collections = collections if collections is not None else seed_collections(now)
        self.orders: Dict[str, Order] = {}
        self.order_ids = order_ids or FixedOrderIds()

    def _missing(self, url: str, throw_on_error: bool) -> RequestResult:
        logger.debug("Not found: %s", url)
        error = ErrorBody(error="not-found")
        if throw_on_error:
            raise NotFoundError(error)
        return as_error(error, url=url)

    # Products

    def get_products(self, query: Optional[ProductQuery] = None) -> RequestResult:
        query = query or ProductQuery()
        items = list(self.products.values())

        if query.collection_id:
            items = [p for p in items if query.collection_id in (p.collection_ids or [])]
        if query.ids is not None:
            ids = set(query.ids)
            items = [p for p in items if p.id in ids]
        if query.sort and query.order:
            reverse = query.order == "desc"
            if query.sort == "price":
                items = sorted(items, key=lambda p: p.price, reverse=reverse)
            elif query.sort == "name":
                items = sorted(items, key=lambda p: collation_key(p.name), reverse=reverse)

        return as_result(Page[Product](items=items, next=None), url="https://example.com/products")

    def get_product(self, product_id: str, throw_on_error: bool = False) -> RequestResult:
        url = f"https://example.com/products/{product_id}"
        product = self.products.get(product_id)
        if product is None:
            return self._missing(url, throw_on_error)
        return as_result(product, url=url)

    # Collections

    def get_collections(self) -> RequestResult:
        items = list(self.collections.values())
        return as_result(Page[Collection](items=items, next=None), url="https://example.com/collections")

    def get_collection(self, collection_id: str, throw_on_error: bool = False) -> RequestResult:
        url = f"https://example.com/collections/{collection_id}"
        collection = self.collections.get(collection_id)
        if collection is None:
            return self._missing(url, throw_on_error)
        # The products relation is never backfilled.
        enriched = CollectionWithProducts(**collection.model_dump(), products=[])
        return as_result(enriched, url=url)

    # Customers

    def create_customer(self, body: Optional[CustomerCreate] = None) -> RequestResult:
        if body is None:
            raise MissingBodyError()
        now = utcnow()
        fields = body.model_dump()
        fields.update(
            id=body.id or DEFAULT_CUSTOMER_ID,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        customer = Customer(**fields)
        return as_result(customer, method="POST", url="https://example.com/customers")

    # Orders

    def find_product_variant(self, variant_id: str) -> ProductVariant:
        for product in self.products.values():
            for variant in product.variants:
                if variant.id == variant_id:
                    return ProductVariant(**variant.model_dump(), product=product)
        logger.warning("Product variant %s not found", variant_id)
        raise VariantNotFoundError(variant_id)

    def _line_item(self, line_item: LineItemInput) -> LineItem:
        fields = line_item.model_dump()
        fields.update(
            id=str(ObjectId()),
            product_variant=self.find_product_variant(line_item.product_variant_id),
        )
        return LineItem(**fields)

    def create_order(self, body: Optional[OrderCreate] = None) -> RequestResult:
        if body is None:
            raise MissingBodyError()

        line_items = [self._line_item(li) for li in body.line_items]
        order_id, number = self.order_ids()
        now = utcnow()
        fields = body.model_dump(exclude={"line_items", "billing_address", "shipping_address"})
        fields.update(
            id=order_id,
            number=number,
            line_items=line_items,
            billing_address=normalize_address(body.billing_address),
            shipping_address=normalize_address(body.shipping_address),
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        order = Order(**fields)
        self.orders[order.id] = order
        logger.info("Created order %s (#%s) with %d line items", order.id, order.number, len(line_items))
        return as_result(order, method="POST", url="https://example.com/orders")

    def get_order(self, order_id: str, throw_on_error: bool = False) -> RequestResult:
        url = f"https://example.com/orders/{order_id}"
        order = self.orders.get(order_id)
        if order is None:
            return self._missing(url, throw_on_error)
        return as_result(order, url=url)
