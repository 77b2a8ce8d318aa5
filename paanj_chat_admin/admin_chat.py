from typing import Optional

from paanj_chat_admin import config
from paanj_chat_admin.clients.base_admin_client import AdminCore
from paanj_chat_admin.resources.conversations import (
    ConversationContext,
    ConversationsResource,
)
from paanj_chat_admin.resources.messages import MessagesResource
from paanj_chat_admin.resources.subscriptions import SubscriptionTracker
from paanj_chat_admin.resources.users import UsersResource


class AdminChat:
    """Chat administration features for the Paanj platform.

    Provides user management, conversation management, message operations
    and real-time event monitoring on top of a connected admin core.

    Example:
        >>> admin = PaanjAdmin("sk_live_key")
        >>> await admin.connect()
        >>> chat = AdminChat(admin)
        >>> chat.messages.on_create(lambda message: print(message))
        >>> user = await chat.users.get("user_123")
        >>> await chat.users("12").block("34")
        >>> await chat.conversation("conv_123").send("Hello!")
    """

    def __init__(
        self,
        admin: AdminCore,
        base_path: Optional[str] = None,
        release_server_subscriptions: Optional[bool] = None,
    ):
        """Create the chat resources.

        Args:
            admin: Admin core client; must already be connected
            base_path: API prefix for every resource path, defaults to
                ``PAANJ_ADMIN_BASE_PATH`` or ``/admin``
            release_server_subscriptions: Send ``admin.unsubscribe`` when the
                last local listener for an event goes away. Defaults to
                ``PAANJ_RELEASE_SERVER_SUBSCRIPTIONS``.
        """
        if release_server_subscriptions is None:
            release_server_subscriptions = config.release_server_subscriptions_enabled()

        self.admin = admin
        self.subscriptions = SubscriptionTracker(
            admin, release_server_subscriptions=release_server_subscriptions
        )

        self.messages = MessagesResource(admin, base_path, self.subscriptions)
        self.users = UsersResource(admin, base_path, self.subscriptions)
        self.conversations = ConversationsResource(
            admin, base_path, self.subscriptions
        )

    def conversation(self, conversation_id: str) -> ConversationContext:
        """Get conversation-specific operations.

        Example:
            >>> conv = chat.conversation("conv_123")
            >>> await conv.send_message("Hello!")
            >>> conv.on_message(lambda message: print(message))
        """
        return self.conversations.conversation(conversation_id)
