"""
Coupon schema

https://woocommerce.github.io/woocommerce-rest-api-docs/#coupon-properties
"""

from typing import List, Optional

from pydantic import Field

from ..scalars import StringTimeField
from .base import Links, WooModel
from .common import MetaData


class Coupon(WooModel):
    id: Optional[int] = None
    code: Optional[str] = None
    slug: Optional[str] = None
    amount: Optional[str] = None
    date_created: Optional[StringTimeField] = None
    date_created_gmt: Optional[StringTimeField] = None
    date_modified: Optional[StringTimeField] = None
    date_modified_gmt: Optional[StringTimeField] = None
    discount_type: Optional[str] = None
    description: Optional[str] = None
    date_expires: Optional[StringTimeField] = None
    date_expires_gmt: Optional[StringTimeField] = None
    usage_count: Optional[int] = None
    individual_use: Optional[bool] = None
    product_ids: Optional[List[int]] = None
    excluded_product_ids: Optional[List[int]] = None
    usage_limit: Optional[int] = None
    usage_limit_per_user: Optional[int] = None
    limit_usage_to_x_items: Optional[int] = None
    free_shipping: Optional[bool] = None
    product_categories: Optional[List[int]] = None
    excluded_product_categories: Optional[List[int]] = None
    exclude_sale_items: Optional[bool] = None
    minimum_amount: Optional[str] = None
    maximum_amount: Optional[str] = None
    nominal_amount: Optional[float] = None
    email_restrictions: Optional[List[str]] = None
    used_by: Optional[List[str]] = None
    meta_data: Optional[List[MetaData]] = None
    status: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")
