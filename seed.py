"""
Seed data loaded into every fresh MockStore.

Tables are returned as dicts keyed by id; insertion order is the declaration
order the listings preserve.
"""

from datetime import datetime
from typing import Dict, List

from schemas import Collection, Product, Variant


APPAREL_SIZES = ["XS", "S", "M", "L", "XL", "XXL", "XXXL"]

COLLECTIONS = [
    {
        "id": "apparel",
        "name": "Perros",
        "description": "Wear your love for Astro on your sleeve.",
        "slug": "apparel",
        "image_url": "/assets/perros.jpg",
    },
    {
        "id": "stickers",
        "name": "Gatos",
        "description": "Load up those laptop lids with Astro pride.",
        "slug": "stickers",
        "image_url": "/assets/astro-sticker-pack.png",
    },
    {
        "id": "bestSellers",
        "name": "Los más vendidos",
        "description": "You'll love these.",
        "slug": "best-sellers",
        "image_url": "/assets/astro-houston-sticker.png",
    },
]

# Products without "variants" get the single default variant.
PRODUCTS = [
    {
        "id": "astro-icon-zip-up-hoodie",
        "name": "Modelo P_001",
        "tagline": "No need to compress this .zip. The Zip Up Hoodie is a comfortable fit and fabric for all sizes.",
        "price": 1200000,
        "image_url": "/assets/modelP_001.jpg",
        "collection_ids": ["apparel", "bestSellers"],
        "sized": True,
    },
    {
        "id": "astro-logo-curve-bill-snapback-cap",
        "name": "Astro Logo Curve Bill Snapback Cap",
        "tagline": "The best hat for any occasion, no cap.",
        "price": 2500,
        "image_url": "/assets/astro-cap.png",
        "collection_ids": ["apparel"],
    },
    {
        "id": "astro-sticker-sheet",
        "name": "Astro Sticker Sheet",
        "tagline": "You probably want this for the fail whale sticker, don't you?",
        "price": 1000,
        "image_url": "/assets/astro-universe-stickers.png",
        "collection_ids": ["stickers"],
    },
    {
        "id": "sticker-pack",
        "name": "Sticker Pack",
        "tagline": "Jam packed with the most popular stickers.",
        "price": 500,
        "image_url": "/assets/astro-sticker-pack.png",
        "collection_ids": ["stickers", "bestSellers"],
    },
    {
        "id": "astro-icon-unisex-shirt",
        "name": "Astro Icon Unisex Shirt",
        "tagline": "A comfy Tee with the classic Astro logo.",
        "price": 1775,
        "image_url": "/assets/astro-unisex-tshirt.png",
        "collection_ids": ["apparel"],
        "sized": True,
    },
    {
        "id": "astro-icon-gradient-sticker",
        "name": "Astro Icon Gradient Sticker",
        "tagline": "There gradi-ain't a better sticker than the classic Astro logo.",
        "price": 200,
        "image_url": "/assets/astro-icon-sticker.png",
        "collection_ids": ["stickers", "bestSellers"],
    },
    {
        "id": "astro-logo-beanie",
        "name": "Astro Logo Beanie",
        "tagline": "There's never Bean a better hat for the winter season.",
        "price": 1800,
        "image_url": "/assets/astro-beanie.png",
        "collection_ids": ["apparel", "bestSellers"],
    },
    {
        "id": "lighthouse-100-sticker",
        "name": "Lighthouse 100 Sticker",
        "tagline": "Bad performance? Not in my (light) house.",
        "price": 500,
        "image_url": "/assets/astro-lighthouse-sticker.png",
        "collection_ids": ["stickers"],
    },
    {
        "id": "houston-sticker",
        "name": "Houston Sticker",
        "tagline": "You can fit a Hous-ton of these on any laptop lid.",
        "price": 250,
        "discount": 100,
        "image_url": "/assets/astro-houston-sticker.png",
        "collection_ids": ["stickers", "bestSellers"],
    },
]


def default_variants() -> List[Variant]:
    return [Variant(id="default", name="Default", stock=20, options={})]


def apparel_variants() -> List[Variant]:
    return [
        Variant(id=size, name=size, stock=index * 12, options={"Size": size})
        for index, size in enumerate(APPAREL_SIZES)
    ]


def seed_collections(now: datetime) -> Dict[str, Collection]:
    return {
        c["id"]: Collection(**c, created_at=now, updated_at=now)
        for c in COLLECTIONS
    }


def seed_products(now: datetime) -> Dict[str, Product]:
    products = {}
    for raw in PRODUCTS:
        data = dict(raw)
        sized = data.pop("sized", False)
        products[data["id"]] = Product(
            **data,
            slug=data["id"],
            variants=apparel_variants() if sized else default_variants(),
            created_at=now,
            updated_at=now,
        )
    return products
