from datetime import datetime
from typing import Optional

from paanj_chat_admin.models.base import WireModel


class Participant(WireModel):
    """Membership of a user in a conversation."""

    user_id: str
    conversation_id: str
    role: Optional[str] = None  # e.g. 'admin', 'member'
    joined_at: Optional[datetime] = None
