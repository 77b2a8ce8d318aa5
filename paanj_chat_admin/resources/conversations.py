from typing import Any, Dict, Mapping, Optional, Union

from paanj_chat_admin.clients.base_admin_client import EventCallback
from paanj_chat_admin.models.conversations import (
    Conversation,
    ConversationUpdate,
    CreateConversationData,
)
from paanj_chat_admin.models.events import Unsubscribe, conversation_event_key
from paanj_chat_admin.models.filters import ConversationFilters
from paanj_chat_admin.models.messages import Message, SendMessageRequest
from paanj_chat_admin.resources.base_resource import (
    CrudResource,
    path_segment,
    require_id,
)
from paanj_chat_admin.resources.query import ConversationQuery


class ConversationsResource(
    CrudResource[
        Conversation, CreateConversationData, ConversationUpdate, ConversationFilters
    ]
):
    """Manage and monitor conversations."""

    collection = "conversations"
    model_class = Conversation
    create_class = CreateConversationData
    update_class = ConversationUpdate
    filters_class = ConversationFilters
    event_prefix = "conversation"

    def query(
        self, filters: Optional[Union[ConversationFilters, Mapping[str, Any]]] = None
    ) -> ConversationQuery:
        """Start a chainable list query, e.g. ``query().user_id("u1").page(2)``."""
        return ConversationQuery(self.list, self._coerce_filters(filters))

    def conversation(self, conversation_id: str) -> "ConversationContext":
        """Get operations scoped to one conversation."""
        return ConversationContext(self, require_id(conversation_id, "conversation_id"))


class ConversationContext:
    """Operations on a single conversation."""

    def __init__(self, resource: ConversationsResource, conversation_id: str):
        self.resource = resource
        self.conversation_id = conversation_id

    @property
    def path(self) -> str:
        segment = path_segment(self.conversation_id, "conversation_id")
        return f"/{self.resource.collection}/{segment}"

    async def send(
        self, content: str, metadata: Optional[Dict[str, Any]] = None
    ) -> Message:
        """Send a message in this conversation."""
        payload = SendMessageRequest(content=content, metadata=metadata).to_wire()
        result = await self.resource._request(
            "POST", f"{self.path}/messages", payload
        )
        return Message.model_validate(result)

    send_message = send

    async def add_participant(self, user_id: str) -> None:
        """Add a participant to this conversation."""
        await self.resource._request(
            "POST",
            f"{self.path}/participants",
            {"userId": require_id(user_id, "user_id")},
        )

    async def remove_participant(self, user_id: str) -> None:
        """Remove a participant from this conversation."""
        segment = path_segment(user_id, "user_id")
        await self.resource._request("DELETE", f"{self.path}/participants/{segment}")

    def on_message(self, callback: EventCallback) -> Unsubscribe:
        """Listen to messages created in this conversation only."""
        return self.resource.subscriptions.subscribe(
            "conversation",
            "message.create",
            callback,
            resource_id=self.conversation_id,
            listener_key=conversation_event_key(
                self.conversation_id, "message.create"
            ),
        )
