"""
Product schema

https://woocommerce.github.io/woocommerce-rest-api-docs/#product-properties
"""

from typing import Any, List, Optional

from pydantic import Field

from ..scalars import StringFloatField, StringTimeField
from .base import Links, WooModel


class Dimensions(WooModel):
    length: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None


class Download(WooModel):
    id: Optional[str] = None
    name: Optional[str] = None
    file: Optional[str] = None


class ProductCategory(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class ProductTag(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class ProductImage(WooModel):
    id: Optional[int] = None
    date_created: Optional[StringTimeField] = None
    date_modified: Optional[StringTimeField] = None
    src: Optional[str] = None
    name: Optional[str] = None
    alt: Optional[str] = None
    position: Optional[int] = None


class ProductAttribute(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    visible: Optional[bool] = None
    variation: Optional[bool] = None
    option: Optional[str] = None
    options: Optional[List[str]] = None


class MetaDatum(WooModel):
    id: Optional[int] = None
    key: Optional[str] = None
    value: Any = None


class Product(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    permalink: Optional[str] = None
    date_created: Optional[StringTimeField] = None
    date_modified: Optional[StringTimeField] = None
    type: Optional[str] = None
    status: Optional[str] = None
    featured: Optional[bool] = None
    catalog_visibility: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[StringFloatField] = None
    regular_price: Optional[StringFloatField] = None
    sale_price: Optional[StringFloatField] = None
    date_on_sale_from: Optional[StringTimeField] = None
    date_on_sale_to: Optional[StringTimeField] = None
    price_html: Optional[str] = None
    on_sale: Optional[bool] = None
    purchasable: Optional[bool] = None
    total_sales: Optional[StringFloatField] = None
    virtual: Optional[bool] = None
    visible: Optional[bool] = None
    downloadable: Optional[bool] = None
    downloads: Optional[List[Download]] = None
    download_limit: Optional[int] = None
    download_expiry: Optional[int] = None
    external_url: Optional[str] = None
    button_text: Optional[str] = None
    tax_status: Optional[str] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: Optional[int] = None
    in_stock: Optional[bool] = None
    backorders: Optional[str] = None
    backorders_allowed: Optional[bool] = None
    backordered: Optional[bool] = None
    sold_individually: Optional[bool] = None
    weight: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    shipping_required: Optional[bool] = None
    shipping_taxable: Optional[bool] = None
    shipping_class: Optional[str] = None
    shipping_class_id: Optional[int] = None
    reviews_allowed: Optional[bool] = None
    average_rating: Optional[str] = None
    rating_count: Optional[int] = None
    related_ids: Optional[List[int]] = None
    upsell_ids: Optional[List[int]] = None
    cross_sell_ids: Optional[List[int]] = None
    parent_id: Optional[int] = None
    purchase_note: Optional[str] = None
    categories: Optional[List[ProductCategory]] = None
    tags: Optional[List[ProductTag]] = None
    image: Optional[List[ProductImage]] = None
    images: Optional[List[ProductImage]] = None
    attributes: Optional[List[ProductAttribute]] = None
    default_attributes: Optional[List[ProductAttribute]] = None
    variations: Optional[List["Product"]] = None
    grouped_products: Optional[List[int]] = None
    menu_order: Optional[int] = None
    meta: Optional[List[MetaDatum]] = None
    download_type: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")
