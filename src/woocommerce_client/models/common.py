"""
Schemas shared across orders, subscriptions and customers
"""

from typing import Any, List, Optional

from ..scalars import PersonTypeField, StringFloatField, StringIntField
from .base import WooModel


class MetaData(WooModel):
    id: Optional[int] = None
    key: Optional[str] = None
    value: Any = None
    label: Optional[str] = None
    display_key: Optional[str] = None
    display_value: Any = None


class Billing(WooModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    billing_email: Optional[str] = None
    billing_company: Optional[str] = None
    phone: Optional[str] = None
    cpf: Optional[str] = None
    rg: Optional[str] = None
    cnpj: Optional[str] = None
    ie: Optional[str] = None
    number: Optional[str] = None
    neighborhood: Optional[str] = None
    persontype: Optional[PersonTypeField] = None
    birthdate: Optional[str] = None
    cellphone: Optional[str] = None
    gender: Optional[str] = None
    church_email: Optional[str] = None
    church_size: Optional[StringIntField] = None
    payer_name: Optional[str] = None
    payer_email: Optional[str] = None
    payer_phone: Optional[str] = None
    church: Optional[str] = None

    def __str__(self) -> str:
        """One "field: value" line per populated field"""
        return "\n".join(
            f"{name}: {value}"
            for name, value in self
            if value not in (None, "", 0)
        )


class Shipping(WooModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    number: Optional[str] = None
    neighborhood: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class Image(WooModel):
    id: Optional[StringIntField] = None
    src: Optional[str] = None


class TaxLine(WooModel):
    id: Optional[int] = None
    rate_code: Optional[str] = None
    rate_id: Optional[str] = None
    label: Optional[str] = None
    compound: Optional[bool] = None
    tax_total: Optional[str] = None
    shipping_tax_total: Optional[str] = None
    meta: Optional[List[MetaData]] = None


class LineItem(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    product_id: Optional[int] = None
    variation_id: Optional[int] = None
    quantity: Optional[int] = None
    tax_class: Optional[str] = None
    subtotal: Optional[str] = None
    subtotal_tax: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    taxes: Optional[List[TaxLine]] = None
    meta: Optional[List[MetaData]] = None
    sku: Optional[str] = None
    price: Optional[StringFloatField] = None
    image: Optional[Image] = None
    parent_name: Optional[str] = None


class FeeLine(WooModel):
    id: Optional[int] = None
    name: Optional[str] = None
    tax_class: Optional[str] = None
    tax_status: Optional[str] = None
    amount: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    taxes: Optional[List[TaxLine]] = None
    meta: Optional[List[MetaData]] = None


class Refund(WooModel):
    id: Optional[int] = None
    refund: Optional[str] = None
    total: Optional[str] = None


class ShippingLines(WooModel):
    id: Optional[int] = None
    method_title: Optional[str] = None
    method_id: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    taxes: Optional[List[TaxLine]] = None
    meta: Optional[List[MetaData]] = None


class CouponLine(WooModel):
    id: Optional[int] = None
    code: Optional[str] = None
    discount: Optional[str] = None
    discount_tax: Optional[str] = None
    meta: Optional[List[MetaData]] = None
