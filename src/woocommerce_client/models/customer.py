"""
Customer schema

https://woocommerce.github.io/woocommerce-rest-api-docs/#customer-properties
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import Links, WooModel
from .common import Billing, MetaData, Shipping


class CustomerLastOrder(WooModel):
    id: Optional[int] = None
    date: Optional[str] = None


class Customer(WooModel):
    id: Optional[int] = None
    avatar_url: Optional[str] = None
    capabilities: Optional[Dict[str, Any]] = None
    date_created: Optional[str] = None
    date_created_gmt: Optional[str] = None
    date_modified: Optional[str] = None
    date_modified_gmt: Optional[str] = None
    last_order: Optional[CustomerLastOrder] = None
    orders_count: Optional[int] = None
    total_spent: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    extra_capabilities: Optional[Dict[str, Any]] = None
    first_name: Optional[str] = None
    is_paying_customer: Optional[bool] = None
    last_name: Optional[str] = None
    link: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    registered_date: Optional[str] = None
    role: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    billing: Optional[Billing] = None
    shipping: Optional[Shipping] = None
    cart_hash: Optional[str] = None
    meta_data: Optional[List[MetaData]] = None
    links: Optional[Links] = Field(default=None, alias="_links")
