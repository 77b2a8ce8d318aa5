from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from paanj_chat_admin.models.base import WireModel
from paanj_chat_admin.models.participants import Participant


class Conversation(WireModel):
    """Conversation data as returned by the admin API."""

    id: str
    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    members: List[Participant] = Field(default_factory=list)


class CreateConversationData(WireModel):
    """Request model for creating a conversation."""

    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    member_ids: List[str] = Field(
        ..., description="IDs of the users to add as initial members"
    )


class ConversationUpdate(WireModel):
    """Partial update for a conversation. Only fields that were set are sent."""

    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
