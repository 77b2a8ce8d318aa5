import logging
from typing import Any, Dict, List, Mapping, Tuple, Union

from paanj_chat_admin.clients.base_admin_client import EventCallback
from paanj_chat_admin.models.events import (
    AdminEvent,
    Unsubscribe,
    conversation_event_key,
)

logger = logging.getLogger(__name__)


class EventEmitter:
    """Registry of callbacks keyed by event name.

    Callbacks for one name run in registration order. Registering the same
    callback twice creates two independent registrations.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Tuple[object, EventCallback]]] = {}

    def on(self, event_name: str, callback: EventCallback) -> Unsubscribe:
        """Register ``callback`` and return a function that removes it again."""
        token = object()
        self._listeners.setdefault(event_name, []).append((token, callback))
        logger.debug(f"Registered listener for {event_name}")

        def unsubscribe() -> None:
            listeners = self._listeners.get(event_name)
            if not listeners:
                return
            remaining = [entry for entry in listeners if entry[0] is not token]
            if len(remaining) == len(listeners):
                return
            if remaining:
                self._listeners[event_name] = remaining
            else:
                del self._listeners[event_name]
            logger.debug(f"Removed listener for {event_name}")

        return unsubscribe

    def emit(self, event_name: str, data: Any) -> int:
        """Invoke every callback registered for ``event_name`` with ``data``.

        Returns:
            The number of callbacks invoked.
        """
        # Snapshot so callbacks may unsubscribe while being dispatched
        listeners = list(self._listeners.get(event_name, []))
        for _, callback in listeners:
            callback(data)
        return len(listeners)

    def dispatch(self, envelope: Union[AdminEvent, Mapping[str, Any]]) -> int:
        """Route an event envelope to its listeners.

        The envelope's ``data`` is passed to callbacks registered under the
        plain event name. Events about a conversation are also delivered under
        the composite ``conversation:<id>:<event>`` key.
        """
        if not isinstance(envelope, AdminEvent):
            envelope = AdminEvent.model_validate(envelope)

        invoked = self.emit(envelope.event, envelope.data)
        if envelope.resource == "conversation" and envelope.resource_id:
            invoked += self.emit(
                conversation_event_key(envelope.resource_id, envelope.event),
                envelope.data,
            )
        return invoked

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, []))
