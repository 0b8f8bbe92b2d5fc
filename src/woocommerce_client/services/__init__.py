"""
Resource services exposed as Client attributes
"""

from .base import ResourceService, SubscriptionChildService
from .coupon import CouponService
from .customer import CustomerService
from .file import FileService
from .order import OrderService
from .product import ProductService
from .subscription import SubscriptionNoteService, SubscriptionOrderService, SubscriptionService

__all__ = [
    'ResourceService',
    'SubscriptionChildService',
    'CouponService',
    'CustomerService',
    'FileService',
    'OrderService',
    'ProductService',
    'SubscriptionService',
    'SubscriptionNoteService',
    'SubscriptionOrderService',
]
