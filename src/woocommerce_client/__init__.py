"""
WooCommerce REST API client

Typed services for coupons, customers, orders, products, subscriptions,
subscription notes, subscription orders and file downloads over a single
request pipeline with authentication, strict decoding, rate-limit aware
retries and Link header pagination.
"""

from .config_loader import ClientConfig, ConfigLoader, ConfigurationError, MissingEnvironmentError
from .errors import (
    ErrorEnvelope,
    PaginationUnavailableError,
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    WooCommerceError,
    check_response_error,
)
from .http_client import App, Client, shop_base_url
from .pagination import Pagination, extract_pagination
from .query import (
    CouponListOptions,
    CustomerListOptions,
    DeleteOption,
    ListOptions,
    OrderListOptions,
    ParentListOptions,
    ProductListOptions,
    SubscriptionListOptions,
    SubscriptionNoteListOptions,
    SubscriptionOrderListOptions,
)
from .scalars import CustomTime, PersonType, StringFloat, StringInt, StringOrInt, StringTime

__version__ = "1.0.0"
__all__ = [
    "App",
    "Client",
    "shop_base_url",
    "ClientConfig",
    "ConfigLoader",
    "ConfigurationError",
    "MissingEnvironmentError",
    "WooCommerceError",
    "ResponseError",
    "RateLimitError",
    "ResponseDecodingError",
    "PaginationUnavailableError",
    "ErrorEnvelope",
    "check_response_error",
    "Pagination",
    "extract_pagination",
    "ListOptions",
    "ParentListOptions",
    "OrderListOptions",
    "CustomerListOptions",
    "CouponListOptions",
    "ProductListOptions",
    "SubscriptionListOptions",
    "SubscriptionNoteListOptions",
    "SubscriptionOrderListOptions",
    "DeleteOption",
    "StringInt",
    "StringFloat",
    "StringOrInt",
    "StringTime",
    "CustomTime",
    "PersonType",
]
