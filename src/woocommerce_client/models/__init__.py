"""
Resource schemas for WooCommerce payloads
"""

from .base import BatchOption, BatchResource, LinkHref, Links, WooModel
from .common import (
    Billing,
    CouponLine,
    FeeLine,
    Image,
    LineItem,
    MetaData,
    Refund,
    Shipping,
    ShippingLines,
    TaxLine,
)
from .coupon import Coupon
from .customer import Customer, CustomerLastOrder
from .file import File
from .order import NFE, Order, PaghiperData, PaypalData
from .product import (
    Dimensions,
    Download,
    MetaDatum,
    Product,
    ProductAttribute,
    ProductCategory,
    ProductImage,
    ProductTag,
)
from .subscription import PaymentDetails, Subscription, SubscriptionNote

__all__ = [
    'WooModel',
    'Links',
    'LinkHref',
    'BatchOption',
    'BatchResource',
    'MetaData',
    'Billing',
    'Shipping',
    'Image',
    'TaxLine',
    'LineItem',
    'FeeLine',
    'Refund',
    'ShippingLines',
    'CouponLine',
    'Coupon',
    'Customer',
    'CustomerLastOrder',
    'File',
    'Order',
    'PaghiperData',
    'NFE',
    'PaypalData',
    'Product',
    'Dimensions',
    'Download',
    'ProductCategory',
    'ProductTag',
    'ProductImage',
    'ProductAttribute',
    'MetaDatum',
    'Subscription',
    'PaymentDetails',
    'SubscriptionNote',
]
