from typing import Any, Callable, List, Literal, Optional

from pydantic import Field

from paanj_chat_admin.models.base import WireModel

Unsubscribe = Callable[[], None]

SubscriptionScope = Literal["global", "conversation", "user"]


class AdminEvent(WireModel):
    """Envelope delivered by the admin core's event channel."""

    type: Literal["admin.event"] = "admin.event"
    event: str = Field(..., description="Dotted event name, e.g. 'user.create'")
    resource: str
    resource_id: Optional[str] = None
    data: Any = None


class AdminSubscription(WireModel):
    """Control message asking the server to start or stop sending events."""

    type: Literal["admin.subscribe", "admin.unsubscribe"] = "admin.subscribe"
    resource: SubscriptionScope
    id: Optional[str] = None
    events: List[str]


class AdminSubscribed(WireModel):
    """Server acknowledgement of an ``AdminSubscription``."""

    type: Literal["admin.subscribed"] = "admin.subscribed"
    resource: str
    id: Optional[str] = None
    events: List[str] = Field(default_factory=list)


class AdminClientOptions(WireModel):
    """Connection options for an admin core client."""

    api_url: Optional[str] = None
    ws_url: Optional[str] = None
    auto_reconnect: Optional[bool] = None
    reconnect_interval: Optional[int] = None  # milliseconds
    max_reconnect_attempts: Optional[int] = None


def conversation_event_key(conversation_id: str, event: str) -> str:
    """Composite event name used for events scoped to one conversation."""
    return f"conversation:{conversation_id}:{event}"
