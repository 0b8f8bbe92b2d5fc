"""
Customer endpoints

https://woocommerce.github.io/woocommerce-rest-api-docs/#customers
"""

from ..models import Customer
from .base import ResourceService


class CustomerService(ResourceService):
    base_path = "customers"
    model = Customer
