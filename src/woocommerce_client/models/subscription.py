"""
Subscription and subscription note schemas (WooCommerce Subscriptions)
"""

from typing import List, Optional

from pydantic import Field

from ..scalars import CustomTimeField, StringIntField
from .base import Links, WooModel
from .common import (
    Billing,
    CouponLine,
    FeeLine,
    LineItem,
    MetaData,
    Shipping,
    ShippingLines,
    TaxLine,
)


class PaymentDetails(WooModel):
    post_meta: Optional[List[MetaData]] = None
    user_meta: Optional[List[MetaData]] = None


class Subscription(WooModel):
    id: Optional[int] = None
    parent_id: Optional[int] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    version: Optional[str] = None
    prices_include_tax: Optional[bool] = None
    date_created: Optional[CustomTimeField] = None
    date_created_gmt: Optional[str] = None
    date_modified: Optional[str] = None
    date_modified_gmt: Optional[CustomTimeField] = None
    date_completed: Optional[str] = None
    date_completed_gmt: Optional[CustomTimeField] = None
    date_paid: Optional[str] = None
    date_paid_gmt: Optional[CustomTimeField] = None
    start_date: Optional[CustomTimeField] = None
    start_date_gmt: Optional[CustomTimeField] = None
    trial_end_date: Optional[str] = None
    trial_end_date_gmt: Optional[str] = None
    next_payment_date: Optional[str] = None
    next_payment_date_gmt: Optional[CustomTimeField] = None
    last_payment_date: Optional[str] = None
    last_payment_date_gmt: Optional[CustomTimeField] = None
    payment_retry_date: Optional[CustomTimeField] = None
    payment_retry_date_gmt: Optional[CustomTimeField] = None
    cancelled_date: Optional[CustomTimeField] = None
    cancelled_date_gmt: Optional[CustomTimeField] = None
    end_date: Optional[str] = None
    end_date_gmt: Optional[CustomTimeField] = None
    discount_total: Optional[str] = None
    discount_tax: Optional[str] = None
    shipping_total: Optional[str] = None
    shipping_tax: Optional[str] = None
    cart_tax: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    customer_id: Optional[int] = None
    order_key: Optional[str] = None
    billing: Optional[Billing] = None
    shipping: Optional[Shipping] = None
    payment_method: Optional[str] = None
    payment_method_title: Optional[str] = None
    customer_ip_address: Optional[str] = None
    customer_user_agent: Optional[str] = None
    created_via: Optional[str] = None
    customer_note: Optional[str] = None
    number: Optional[str] = None
    meta_data: Optional[List[MetaData]] = None
    line_items: Optional[List[LineItem]] = None
    tax_lines: Optional[List[TaxLine]] = None
    shipping_lines: Optional[List[ShippingLines]] = None
    fee_lines: Optional[List[FeeLine]] = None
    coupon_lines: Optional[List[CouponLine]] = None
    billing_period: Optional[str] = None
    billing_interval: Optional[StringIntField] = None
    resubscribed_from: Optional[str] = None
    resubscribed_subscription: Optional[str] = None
    removed_line_items: Optional[List[LineItem]] = None
    payment_details: Optional[PaymentDetails] = None
    payment_url: Optional[str] = None
    transition_status: Optional[str] = None
    correios_tracking_code: Optional[str] = None
    needs_payment: Optional[bool] = None
    needs_processing: Optional[bool] = None
    is_editable: Optional[bool] = None
    links: Optional[Links] = Field(default=None, alias="_links")


class SubscriptionNote(WooModel):
    id: Optional[int] = None
    date_created: Optional[str] = None
    date_created_gmt: Optional[str] = None
    note: Optional[str] = None
    customer_note: Optional[bool] = None
    added_by_user: Optional[bool] = None
    author: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")
