from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from paanj_chat_admin.models.base import WireModel


class User(WireModel):
    """A chat platform user as returned by the admin API."""

    user_id: str
    email: str
    name: str
    user_data: Optional[Dict[str, Any]] = Field(
        default=None, description="Opaque application data attached to the user"
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateUserData(WireModel):
    """Request model for creating a user."""

    email: str = Field(..., description="User email address")
    name: str = Field(..., description="Display name")
    user_data: Optional[Dict[str, Any]] = None


class UserUpdate(WireModel):
    """Partial update for a user. Only fields that were set are sent."""

    email: Optional[str] = None
    name: Optional[str] = None
    user_data: Optional[Dict[str, Any]] = None
