"""
Generic resource services over the client's request pipeline

A service only knows its base path and payload schema; every call goes through
Client.create_and_do / create_and_do_get_headers.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Type

from ..models import BatchOption, BatchResource, WooModel
from ..pagination import Pagination, extract_pagination

if TYPE_CHECKING:
    from ..http_client import Client


class ResourceService:
    """CRUD, listing and batch operations for a top-level resource"""

    base_path: str = ""
    model: Type[WooModel] = WooModel

    def __init__(self, client: "Client"):
        self.client = client

    def list(self, options: Any = None) -> List[Any]:
        """List resources, discarding pagination"""
        items, _ = self.list_with_pagination(options)
        return items

    def list_with_pagination(self, options: Any = None,
                             strict: bool = False) -> Tuple[List[Any], Optional[Pagination]]:
        """
        List resources along with the pagination cursors of the response

        Args:
            options: Query options, e.g. ListOptions(page=2)
            strict: Raise PaginationUnavailableError for a malformed Link header
                instead of returning None pagination

        Returns:
            Tuple of (resources, pagination or None)
        """
        return _list_with_pagination(self.client, self.base_path, self.model, options, strict)

    def create(self, entity: WooModel) -> Any:
        return self.client.post(self.base_path, entity, self.model)

    def get(self, resource_id: int, options: Any = None) -> Any:
        return self.client.get(f"{self.base_path}/{resource_id}", self.model, options)

    def update(self, entity: WooModel) -> Any:
        """Update a resource, addressed by entity.id"""
        return self.client.put(f"{self.base_path}/{entity.id}", entity, self.model)

    def delete(self, resource_id: int, options: Any = None) -> Any:
        return self.client.delete(f"{self.base_path}/{resource_id}", options, self.model)

    def batch(self, data: BatchOption) -> BatchResource:
        """Create, update and delete several resources in one request"""
        return self.client.post(f"{self.base_path}/batch", data, BatchResource[self.model])


class SubscriptionChildService:
    """
    Operations for a resource nested under a subscription

    base_path is a template formatted with the owning subscription id, e.g.
    "subscriptions/{subscription_id}/notes".
    """

    base_path: str = ""
    model: Type[WooModel] = WooModel

    def __init__(self, client: "Client"):
        self.client = client

    def _path(self, subscription_id: int) -> str:
        return self.base_path.format(subscription_id=subscription_id)

    def list(self, subscription_id: int, options: Any = None) -> List[Any]:
        items, _ = self.list_with_pagination(subscription_id, options)
        return items

    def list_with_pagination(self, subscription_id: int, options: Any = None,
                             strict: bool = False) -> Tuple[List[Any], Optional[Pagination]]:
        return _list_with_pagination(
            self.client, self._path(subscription_id), self.model, options, strict
        )

    def create(self, subscription_id: int, entity: WooModel) -> Any:
        return self.client.post(self._path(subscription_id), entity, self.model)

    def get(self, subscription_id: int, resource_id: int, options: Any = None) -> Any:
        return self.client.get(f"{self._path(subscription_id)}/{resource_id}", self.model, options)

    def update(self, subscription_id: int, entity: WooModel) -> Any:
        return self.client.put(f"{self._path(subscription_id)}/{entity.id}", entity, self.model)

    def delete(self, subscription_id: int, resource_id: int, options: Any = None) -> Any:
        return self.client.delete(f"{self._path(subscription_id)}/{resource_id}", options, self.model)

    def batch(self, subscription_id: int, data: BatchOption) -> BatchResource:
        return self.client.post(
            f"{self._path(subscription_id)}/batch", data, BatchResource[self.model]
        )


def _list_with_pagination(client: "Client", path: str, model: Type[WooModel],
                          options: Any, strict: bool) -> Tuple[List[Any], Optional[Pagination]]:
    items, headers = client.create_and_do_get_headers("GET", path, None, options, List[model])
    return items, extract_pagination(headers, strict=strict)
