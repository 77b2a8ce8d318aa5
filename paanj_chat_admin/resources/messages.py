from paanj_chat_admin.clients.base_admin_client import EventCallback
from paanj_chat_admin.models.events import Unsubscribe
from paanj_chat_admin.resources.base_resource import BaseResource


class MessagesResource(BaseResource):
    """Monitor messages.

    Event subscriptions only; messages are sent through
    ``ConversationsResource.conversation(id).send``.
    """

    def on_create(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all message creation events globally."""
        return self._subscribe_global("message.create", callback)

    def on_send(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all message send events globally."""
        return self._subscribe_global("message.send", callback)

    def on_update(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all message update events globally."""
        return self._subscribe_global("message.update", callback)

    def on_delete(self, callback: EventCallback) -> Unsubscribe:
        """Listen to all message delete events globally."""
        return self._subscribe_global("message.delete", callback)
