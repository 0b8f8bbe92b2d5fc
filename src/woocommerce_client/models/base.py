"""
Base schema for WooCommerce payloads

Payloads are decoded strictly: a field the schema does not declare is a
decoding error rather than being dropped.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class WooModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class LinkHref(WooModel):
    href: str


class Links(WooModel):
    """HAL style links attached to every resource"""
    self_: Optional[List[LinkHref]] = Field(default=None, alias="self")
    collection: Optional[List[LinkHref]] = None
    customer: Optional[List[LinkHref]] = None
    up: Optional[List[LinkHref]] = None


class BatchOption(WooModel, Generic[T]):
    """
    Batch request body: resources to create and update, ids to delete

    https://woocommerce.github.io/woocommerce-rest-api-docs/#batch-update-orders
    """
    create: Optional[List[T]] = None
    update: Optional[List[T]] = None
    delete: Optional[List[int]] = None


class BatchResource(WooModel, Generic[T]):
    """Batch response body, mirroring BatchOption with full resources"""
    create: Optional[List[T]] = None
    update: Optional[List[T]] = None
    delete: Optional[List[T]] = None
