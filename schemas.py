"""
Storefront Schemas

Pydantic models describing the storefront API's request and response shapes.
The in-memory store builds and returns these models, and the HTTP layer uses
them as request bodies and response models.

Attributes are snake_case in Python and camelCase on the wire:
- Product.image_url -> "imageUrl"
- Order.line_items -> "lineItems"
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class StorefrontModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Timestamps(StorefrontModel):
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


# ----------------------------- Catalog -----------------------------

class Variant(StorefrontModel):
    id: str = Field(..., description="Unique within the owning product, e.g. 'M' or 'default'")
    name: str
    stock: int = Field(..., ge=0, description="Units in stock for this variant")
    options: Dict[str, str] = Field(default_factory=dict, description="Option name to value, e.g. Size -> M")


class Product(Timestamps):
    id: str
    name: str
    slug: str = Field(..., description="URL-friendly identifier")
    tagline: str = ""
    description: str = ""
    price: int = Field(..., ge=0, description="Price in minor units (cents)")
    discount: int = Field(0, ge=0, description="Discount in minor units (cents)")
    image_url: str
    images: List[str] = Field(default_factory=list, description="Image URLs")
    collection_ids: Optional[List[str]] = None
    variants: List[Variant] = Field(..., min_length=1)


class Collection(Timestamps):
    id: str
    name: str
    description: str = ""
    slug: str
    image_url: str


class CollectionWithProducts(Collection):
    products: List[Product] = Field(default_factory=list)


class Page(StorefrontModel, Generic[T]):
    items: List[T]
    next: Optional[str] = None


class ProductQuery(StorefrontModel):
    """Filter options accepted by the product listing."""
    collection_id: Optional[str] = None
    ids: Optional[Union[str, List[str]]] = None
    sort: Optional[Literal["price", "name"]] = None
    order: Optional[Literal["asc", "desc"]] = None

    @field_validator("ids")
    @classmethod
    def ids_as_list(cls, v):
        if isinstance(v, str):
            return [v]
        return v


# ----------------------------- Customers -----------------------------

class CustomerCreate(StorefrontModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class Customer(CustomerCreate, Timestamps):
    id: str


# ----------------------------- Orders -----------------------------

class AddressInput(StorefrontModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    province: Optional[str] = None
    postal: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class Address(StorefrontModel):
    line1: str = ""
    line2: str = ""
    city: str = ""
    country: str = ""
    province: str = ""
    postal: str = ""
    phone: Optional[str] = None
    company: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


def normalize_address(address: Optional[AddressInput]) -> Address:
    """Fill every missing address field with its default ("" or None)."""
    if address is None:
        return Address()
    provided = {k: v for k, v in address.model_dump().items() if v is not None}
    return Address(**provided)


class LineItemInput(StorefrontModel):
    model_config = ConfigDict(extra="allow")

    product_variant_id: str
    quantity: Optional[int] = None


class ProductVariant(Variant):
    """A variant joined with the product that owns it."""
    product: Product


class LineItem(LineItemInput):
    id: str
    product_variant: ProductVariant


class OrderCreate(StorefrontModel):
    model_config = ConfigDict(extra="allow")

    line_items: List[LineItemInput] = Field(default_factory=list)
    billing_address: Optional[AddressInput] = None
    shipping_address: Optional[AddressInput] = None


class Order(Timestamps):
    model_config = ConfigDict(extra="allow")

    id: str
    number: int = Field(..., description="Sequential display number")
    line_items: List[LineItem]
    billing_address: Address
    shipping_address: Address


# ----------------------------- Results -----------------------------

class ErrorBody(BaseModel):
    error: Literal["not-found"] = "not-found"


class RequestInfo(BaseModel):
    method: str = "GET"
    url: str = "https://example.com"


class ResponseInfo(BaseModel):
    status: int = 200


class RequestResult(BaseModel, Generic[T]):
    """Either `data` or `error` is set, never both."""
    data: Optional[T] = None
    error: Optional[ErrorBody] = None
    request: RequestInfo = Field(default_factory=RequestInfo)
    response: ResponseInfo = Field(default_factory=ResponseInfo)
