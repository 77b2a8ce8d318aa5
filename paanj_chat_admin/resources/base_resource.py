import logging
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from paanj_chat_admin import config
from paanj_chat_admin.clients.base_admin_client import AdminCore, EventCallback
from paanj_chat_admin.exceptions import InvalidArgumentError
from paanj_chat_admin.models.base import WireModel
from paanj_chat_admin.models.events import Unsubscribe
from paanj_chat_admin.models.filters import ListFilters
from paanj_chat_admin.resources.subscriptions import SubscriptionTracker

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateType = TypeVar("CreateType", bound=WireModel)
UpdateType = TypeVar("UpdateType", bound=WireModel)
FiltersType = TypeVar("FiltersType", bound=ListFilters)
WireType = TypeVar("WireType", bound=WireModel)


def require_id(value: Any, argument: str) -> str:
    """Return ``value`` as a string id, rejecting empty ids."""
    if value is None or str(value).strip() == "":
        raise InvalidArgumentError(f"{argument} must not be empty", argument, value)
    return str(value)


def path_segment(value: Any, argument: str) -> str:
    """Return ``value`` percent-encoded as a single path segment.

    Reserved characters are all escaped and a bare ``.`` or ``..`` has its
    dots encoded, so an id can never address a different endpoint.
    """
    segment = quote(require_id(value, argument), safe="")
    if segment in (".", ".."):
        return segment.replace(".", "%2E")
    return segment


def coerce_model(model_class: Type[WireType], value: Any) -> WireType:
    """Accept either an instance of ``model_class`` or a mapping of its fields."""
    if isinstance(value, model_class):
        return value
    return model_class.model_validate(value)


class BaseResource:
    """Shared plumbing for resources backed by an admin core."""

    def __init__(
        self,
        admin: AdminCore,
        base_path: Optional[str] = None,
        subscriptions: Optional[SubscriptionTracker] = None,
    ):
        self.admin = admin
        self.base_path = config.resolve_base_path(base_path)
        self.subscriptions = subscriptions or SubscriptionTracker(admin)

    async def _request(self, method: str, path: str, body: Optional[Any] = None) -> Any:
        """Issue exactly one request through the admin core's HTTP client."""
        http_client = self.admin.get_http_client()
        full_path = f"{self.base_path}{path}"
        logger.debug(f"{method} {full_path}")
        if body is None:
            return await http_client.request(method, full_path)
        return await http_client.request(method, full_path, body)

    def _subscribe_global(self, event: str, callback: EventCallback) -> Unsubscribe:
        return self.subscriptions.subscribe("global", event, callback)


class CrudResource(
    BaseResource, Generic[ModelType, CreateType, UpdateType, FiltersType]
):
    """Generic base resource with the CRUD operations every collection shares.

    Subclasses set ``collection`` (the path segment), the model classes, and
    ``event_prefix`` for the global ``<prefix>.create|update|delete`` events.
    """

    collection: str
    model_class: Type[ModelType]
    create_class: Type[CreateType]
    update_class: Type[UpdateType]
    filters_class: Type[FiltersType]
    event_prefix: str

    async def create(self, data: Union[CreateType, Mapping[str, Any]]) -> ModelType:
        """Create a new record."""
        payload = coerce_model(self.create_class, data).to_wire()
        result = await self._request("POST", f"/{self.collection}", payload)
        return self.model_class.model_validate(result)

    async def get(self, id: str) -> ModelType:
        """Get a single record by ID.

        Unknown ids fail with the transport's not-found error.
        """
        record_id = path_segment(id, "id")
        result = await self._request("GET", f"/{self.collection}/{record_id}")
        return self.model_class.model_validate(result)

    async def update(
        self, id: str, updates: Union[UpdateType, Mapping[str, Any]]
    ) -> ModelType:
        """Update an existing record. Only the fields set on ``updates`` are sent."""
        record_id = path_segment(id, "id")
        payload = coerce_model(self.update_class, updates).to_wire(exclude_unset=True)
        result = await self._request(
            "PATCH", f"/{self.collection}/{record_id}", payload
        )
        return self.model_class.model_validate(result)

    async def delete(self, id: str) -> None:
        """Delete a record by ID."""
        record_id = path_segment(id, "id")
        await self._request("DELETE", f"/{self.collection}/{record_id}")

    async def list(
        self, filters: Optional[Union[FiltersType, Mapping[str, Any]]] = None
    ) -> List[ModelType]:
        """List records. Filters that are not set are not sent."""
        params = self._coerce_filters(filters).to_query_params()
        query = str(httpx.QueryParams(params))
        path = f"/{self.collection}?{query}" if query else f"/{self.collection}"

        result = await self._request("GET", path)
        return [self.model_class.model_validate(item) for item in result or []]

    def on_create(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all creation events globally."""
        return self._subscribe_global(f"{self.event_prefix}.create", callback)

    def on_update(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all update events globally."""
        return self._subscribe_global(f"{self.event_prefix}.update", callback)

    def on_delete(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all delete events globally."""
        return self._subscribe_global(f"{self.event_prefix}.delete", callback)

    def _coerce_filters(
        self, filters: Optional[Union[FiltersType, Mapping[str, Any]]]
    ) -> FiltersType:
        if filters is None:
            return self.filters_class()
        return coerce_model(self.filters_class, filters)
