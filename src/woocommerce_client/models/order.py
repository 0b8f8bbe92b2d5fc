"""
Order schema

https://woocommerce.github.io/woocommerce-rest-api-docs/#order-properties
"""

from typing import List, Optional

from pydantic import Field

from ..scalars import StringFloatField, StringIntField, StringOrIntField, StringTimeField
from .base import Links, WooModel
from .common import (
    Billing,
    CouponLine,
    FeeLine,
    LineItem,
    MetaData,
    Refund,
    Shipping,
    ShippingLines,
    TaxLine,
)


class PaghiperData(WooModel):
    """Boleto/PIX transaction data added by the PagHiper gateway"""
    order_transaction_due_date: Optional[StringTimeField] = None
    transaction_type: Optional[str] = None
    transaction_id: Optional[str] = None
    value_cents: Optional[StringFloatField] = None
    status: Optional[str] = None
    order_id: Optional[StringIntField] = None
    current_transaction_due_date: Optional[StringTimeField] = None
    qrcode_base64: Optional[str] = None
    qrcode_image_url: Optional[str] = None
    emv: Optional[str] = None
    bacen_url: Optional[str] = None
    pix_url: Optional[str] = None
    digitable_line: Optional[str] = None
    url_slip: Optional[str] = None
    url_slip_pdf: Optional[str] = None
    barcode: Optional[str] = None


class NFE(WooModel):
    """Brazilian electronic invoice attached to an order"""
    uuid: Optional[str] = None
    status: Optional[str] = None
    modelo: Optional[str] = None
    chave_acesso: Optional[str] = None
    n_recibo: Optional[StringIntField] = None
    n_nfe: Optional[StringIntField] = None
    n_serie: Optional[StringOrIntField] = None
    nfe_doc: Optional[str] = None
    pdf: Optional[str] = None
    url_pdf: Optional[str] = None
    url_xml: Optional[str] = None
    url_danfe: Optional[str] = None
    url_danfe_simplificada: Optional[str] = None
    url_danfe_etiqueta: Optional[str] = None
    pdf_rps: Optional[str] = None
    data: Optional[StringTimeField] = None


class PaypalData(WooModel):
    transaction_id: Optional[str] = None
    paid_date: Optional[StringTimeField] = None
    completed_date: Optional[StringTimeField] = None
    paypal_subscription_id: Optional[str] = None
    paypal_status: Optional[str] = None
    ipn_tracking_ids: Optional[List[str]] = None


class Order(WooModel):
    id: Optional[int] = None
    parent_id: Optional[int] = None
    number: Optional[str] = None
    order_key: Optional[str] = None
    created_via: Optional[str] = None
    version: Optional[str] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    date_created: Optional[StringTimeField] = None
    date_created_gmt: Optional[StringTimeField] = None
    date_modified: Optional[StringTimeField] = None
    date_modified_gmt: Optional[StringTimeField] = None
    discount_total: Optional[StringFloatField] = None
    discount_tax: Optional[StringFloatField] = None
    shipping_total: Optional[StringFloatField] = None
    shipping_tax: Optional[StringFloatField] = None
    cart_tax: Optional[StringFloatField] = None
    total: Optional[StringFloatField] = None
    total_tax: Optional[StringFloatField] = None
    prices_include_tax: Optional[bool] = None
    customer_id: Optional[int] = None
    customer_ip_address: Optional[str] = None
    customer_user_agent: Optional[str] = None
    customer_note: Optional[str] = None
    billing: Optional[Billing] = None
    shipping: Optional[Shipping] = None
    payment_method: Optional[str] = None
    payment_method_title: Optional[str] = None
    transaction_id: Optional[str] = None
    date_paid: Optional[StringTimeField] = None
    date_paid_gmt: Optional[StringTimeField] = None
    date_completed: Optional[StringTimeField] = None
    date_completed_gmt: Optional[StringTimeField] = None
    cart_hash: Optional[str] = None
    meta: Optional[List[MetaData]] = None
    renewal: Optional[StringIntField] = None
    line_items: Optional[List[LineItem]] = None
    tax_lines: Optional[List[TaxLine]] = None
    shipping_lines: Optional[List[ShippingLines]] = None
    fee_lines: Optional[List[FeeLine]] = None
    coupon_lines: Optional[List[CouponLine]] = None
    refunds: Optional[List[Refund]] = None
    payment_url: Optional[str] = None
    currency_symbol: Optional[str] = None
    links: Optional[Links] = Field(default=None, alias="_links")
    set_paid: Optional[bool] = None
    is_editable: Optional[bool] = None
    needs_payment: Optional[bool] = None
    needs_processing: Optional[bool] = None
    correios_tracking_code: Optional[str] = None
    order_type: Optional[str] = None
    wc_paghiper_data: Optional[PaghiperData] = None
    nfe: Optional[List[NFE]] = None
    paypal: Optional[PaypalData] = None
