from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import Field

from paanj_chat_admin.models.base import WireModel


class SendMessageRequest(WireModel):
    """Request model for sending a message into a conversation."""

    content: str = Field(..., description="Message content")
    metadata: Optional[Dict[str, Any]] = Field(
        default=None, description="Opaque metadata stored with the message"
    )


class Message(WireModel):
    """Response model for message data."""

    id: str
    conversation_id: str
    sender: str
    content: str
    metadata: Optional[Dict[str, Any]] = None
    timestamp: Optional[Union[int, float]] = None  # epoch milliseconds
    created_at: Optional[datetime] = None
