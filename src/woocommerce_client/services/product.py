"""
Product endpoints

https://woocommerce.github.io/woocommerce-rest-api-docs/#products
"""

from ..models import Product
from .base import ResourceService


class ProductService(ResourceService):
    base_path = "products"
    model = Product
