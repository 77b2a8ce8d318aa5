import logging
from typing import Dict, Optional, Tuple

from paanj_chat_admin.clients.base_admin_client import AdminCore, EventCallback
from paanj_chat_admin.models.events import (
    AdminSubscription,
    SubscriptionScope,
    Unsubscribe,
)

logger = logging.getLogger(__name__)

# (resource scope, resource id, event name)
SubscriptionKey = Tuple[str, Optional[str], str]


class SubscriptionTracker:
    """Sends subscribe control messages and registers callbacks on the admin core.

    Every registration sends its own ``admin.subscribe`` message, even when an
    identical one is already active. Unsubscribing always removes the local
    callback. With ``release_server_subscriptions`` enabled, removing the last
    callback for a (scope, id, event) key also sends ``admin.unsubscribe``
    for that key.
    """

    def __init__(self, admin: AdminCore, release_server_subscriptions: bool = False):
        self.admin = admin
        self.release_server_subscriptions = release_server_subscriptions
        self._counts: Dict[SubscriptionKey, int] = {}

    def subscribe(
        self,
        resource: SubscriptionScope,
        event: str,
        callback: EventCallback,
        resource_id: Optional[str] = None,
        listener_key: Optional[str] = None,
    ) -> Unsubscribe:
        """Subscribe to ``event`` and register ``callback`` for it.

        Args:
            resource: Subscription scope sent to the server
            event: Event name sent to the server
            callback: Invoked with the event data
            resource_id: Scope id, for conversation or user scoped events
            listener_key: Name the callback is registered under locally;
                defaults to ``event``

        Returns:
            A function that removes this registration. Calling it more than
            once has no further effect.
        """
        self._send("admin.subscribe", resource, event, resource_id)
        remove_listener = self.admin.on(listener_key or event, callback)

        key: SubscriptionKey = (resource, resource_id, event)
        self._counts[key] = self._counts.get(key, 0) + 1
        released = False

        def unsubscribe() -> None:
            nonlocal released
            if released:
                return
            released = True
            remove_listener()
            self._release(key)

        return unsubscribe

    def active_count(
        self, resource: str, event: str, resource_id: Optional[str] = None
    ) -> int:
        """Number of live local registrations for a subscription key."""
        return self._counts.get((resource, resource_id, event), 0)

    def _release(self, key: SubscriptionKey) -> None:
        remaining = self._counts.get(key, 0) - 1
        if remaining > 0:
            self._counts[key] = remaining
            return

        self._counts.pop(key, None)
        if self.release_server_subscriptions:
            resource, resource_id, event = key
            self._send("admin.unsubscribe", resource, event, resource_id)  # type: ignore[arg-type]

    def _send(
        self,
        message_type: str,
        resource: SubscriptionScope,
        event: str,
        resource_id: Optional[str],
    ) -> None:
        message = AdminSubscription(
            type=message_type,  # type: ignore[arg-type]
            resource=resource,
            id=resource_id,
            events=[event],
        )
        logger.debug(f"{message_type} {resource}:{resource_id or '*'} {event}")
        self.admin.subscribe(message.to_wire())
