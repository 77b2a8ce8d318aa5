"""Chat administration SDK for the Paanj admin API."""

from .admin_chat import AdminChat
from .clients import AdminCore, AdminHttpClient, EventEmitter, HttpClient
from .exceptions import ChatAdminError, InvalidArgumentError
from .models import (
    AdminEvent,
    AdminSubscription,
    Conversation,
    ConversationFilters,
    ConversationUpdate,
    CreateConversationData,
    CreateUserData,
    Message,
    Participant,
    Unsubscribe,
    User,
    UserFilters,
    UserUpdate,
)
from .resources import (
    AdminUserContext,
    ConversationContext,
    ConversationQuery,
    ConversationsResource,
    MessagesResource,
    UserQuery,
    UsersResource,
)

__all__ = [
    "AdminChat",
    # Admin core interfaces
    "AdminCore",
    "HttpClient",
    "AdminHttpClient",
    "EventEmitter",
    # Errors
    "ChatAdminError",
    "InvalidArgumentError",
    # Models
    "User",
    "Conversation",
    "Participant",
    "Message",
    "CreateUserData",
    "UserUpdate",
    "CreateConversationData",
    "ConversationUpdate",
    "UserFilters",
    "ConversationFilters",
    "AdminEvent",
    "AdminSubscription",
    "Unsubscribe",
    # Resources
    "UsersResource",
    "ConversationsResource",
    "MessagesResource",
    "ConversationContext",
    "AdminUserContext",
    "UserQuery",
    "ConversationQuery",
]
