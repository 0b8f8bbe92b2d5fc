"""
Query option types and their URL query encoding

Each option type lists its own parameters in ``to_query``; zero values are
left out and list values repeat their key.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

QueryPairs = List[Tuple[str, str]]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_pairs(key: str, value: Any) -> QueryPairs:
    """
    Encode a single parameter

    Args:
        key: Query parameter name
        value: Scalar or list value

    Returns:
        List of (key, value) pairs, empty when the value is a zero value
    """
    if value is None or value == "" or value is False:
        return []
    if isinstance(value, (list, tuple, set)):
        return [(key, _render(item)) for item in value]
    if isinstance(value, (int, float)) and value == 0:
        return []
    return [(key, _render(value))]


def encode_options(options: Any) -> QueryPairs:
    """
    Turn caller supplied options into ordered query pairs

    Args:
        options: None, an object with ``to_query()``, a mapping, or a
            sequence of (key, value) pairs

    Returns:
        Ordered list of (key, value) pairs

    Raises:
        TypeError: If the options cannot be encoded
    """
    if options is None:
        return []
    if hasattr(options, "to_query"):
        return options.to_query()
    if isinstance(options, Mapping):
        pairs: QueryPairs = []
        for key, value in options.items():
            pairs.extend(query_pairs(key, value))
        return pairs
    if isinstance(options, (list, tuple)):
        return [(key, _render(value)) for key, value in options]
    raise TypeError(f"Unsupported query options type: {type(options).__name__}")


@dataclass
class ListOptions:
    """Options shared by most collection endpoints"""
    context: str = ""
    page: int = 0
    per_page: int = 0
    search: str = ""
    after: str = ""
    before: str = ""
    exclude: List[int] = field(default_factory=list)
    include: List[int] = field(default_factory=list)
    offset: int = 0
    order: str = ""
    orderby: str = ""

    def to_query(self) -> QueryPairs:
        pairs: QueryPairs = []
        pairs += query_pairs("context", self.context)
        pairs += query_pairs("page", self.page)
        pairs += query_pairs("per_page", self.per_page)
        pairs += query_pairs("search", self.search)
        pairs += query_pairs("after", self.after)
        pairs += query_pairs("before", self.before)
        pairs += query_pairs("exclude", self.exclude)
        pairs += query_pairs("include", self.include)
        pairs += query_pairs("offset", self.offset)
        pairs += query_pairs("order", self.order)
        pairs += query_pairs("orderby", self.orderby)
        return pairs


@dataclass
class ParentListOptions(ListOptions):
    """List options for collections filterable by parent"""
    parent: List[int] = field(default_factory=list)
    parent_exclude: List[int] = field(default_factory=list)

    def to_query(self) -> QueryPairs:
        return (
            super().to_query()
            + query_pairs("parent", self.parent)
            + query_pairs("parent_exclude", self.parent_exclude)
        )


@dataclass
class OrderListOptions(ParentListOptions):
    """
    Filters for orders, subscriptions and subscription orders

    https://woocommerce.github.io/woocommerce-rest-api-docs/#list-all-orders
    """
    status: List[str] = field(default_factory=list)
    customer: int = 0
    product: int = 0
    dp: int = 0

    def to_query(self) -> QueryPairs:
        return (
            super().to_query()
            + query_pairs("status", self.status)
            + query_pairs("customer", self.customer)
            + query_pairs("product", self.product)
            + query_pairs("dp", self.dp)
        )


SubscriptionListOptions = OrderListOptions
SubscriptionOrderListOptions = OrderListOptions
SubscriptionNoteListOptions = ParentListOptions


@dataclass
class CustomerListOptions(ParentListOptions):
    status: List[str] = field(default_factory=list)
    dp: int = 0

    def to_query(self) -> QueryPairs:
        return (
            super().to_query()
            + query_pairs("status", self.status)
            + query_pairs("dp", self.dp)
        )


CouponListOptions = ListOptions
ProductListOptions = ListOptions


@dataclass
class DeleteOption:
    """
    Delete behaviour for a single resource

    force=True permanently deletes the resource; otherwise it is moved to
    the trash and can still be fetched with its status changed.
    """
    force: Optional[bool] = None

    def to_query(self) -> QueryPairs:
        return query_pairs("force", self.force)
