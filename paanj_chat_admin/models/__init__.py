# Export all models
from .conversations import Conversation, ConversationUpdate, CreateConversationData
from .events import (
    AdminClientOptions,
    AdminEvent,
    AdminSubscribed,
    AdminSubscription,
    SubscriptionScope,
    Unsubscribe,
    conversation_event_key,
)
from .filters import ConversationFilters, ListFilters, UserFilters
from .messages import Message, SendMessageRequest
from .participants import Participant
from .users import CreateUserData, User, UserUpdate

__all__ = [
    # Entities
    "User",
    "Conversation",
    "Participant",
    "Message",
    # Requests
    "CreateUserData",
    "UserUpdate",
    "CreateConversationData",
    "ConversationUpdate",
    "SendMessageRequest",
    # Filters
    "ListFilters",
    "UserFilters",
    "ConversationFilters",
    # Events
    "AdminEvent",
    "AdminSubscription",
    "AdminSubscribed",
    "AdminClientOptions",
    "SubscriptionScope",
    "Unsubscribe",
    "conversation_event_key",
]
