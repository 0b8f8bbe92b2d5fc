"""
Order endpoints

https://woocommerce.github.io/woocommerce-rest-api-docs/#orders
"""

from ..models import Order
from .base import ResourceService


class OrderService(ResourceService):
    base_path = "orders"
    model = Order
