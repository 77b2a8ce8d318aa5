# Resource facades over the admin core
from .admin_user_context import AdminUserContext
from .base_resource import BaseResource, CrudResource
from .conversations import ConversationContext, ConversationsResource
from .messages import MessagesResource
from .query import ConversationQuery, ListQuery, UserQuery
from .subscriptions import SubscriptionTracker
from .users import UsersResource

__all__ = [
    "AdminUserContext",
    "BaseResource",
    "CrudResource",
    "ConversationContext",
    "ConversationsResource",
    "MessagesResource",
    "ListQuery",
    "UserQuery",
    "ConversationQuery",
    "SubscriptionTracker",
    "UsersResource",
]
