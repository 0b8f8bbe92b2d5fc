"""
Coupon endpoints

https://woocommerce.github.io/woocommerce-rest-api-docs/#coupons
"""

from ..models import Coupon
from .base import ResourceService


class CouponService(ResourceService):
    base_path = "coupons"
    model = Coupon
