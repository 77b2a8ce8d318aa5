"""
Basic usage of the chat admin SDK.

Reads PAANJ_API_URL and PAANJ_SECRET_KEY from the environment (or a .env
file), registers event listeners, then fetches and updates a user and sends a
message to a conversation.

``LocalAdmin`` below only speaks HTTP: it records subscription messages and
routes events pushed through ``dispatch``. Swap it for a connected admin
client to receive live events.

    python examples/basic_usage.py
"""

import asyncio
from typing import Any, Dict, List

import httpx

from paanj_chat_admin import AdminChat, AdminHttpClient, EventEmitter, config
from paanj_chat_admin.clients.base_admin_client import EventCallback
from paanj_chat_admin.models.events import Unsubscribe


class LocalAdmin:
    """Admin core backed by the SDK's own HTTP client and event emitter."""

    def __init__(self) -> None:
        self.http_client = AdminHttpClient()
        self.emitter = EventEmitter()
        self.subscriptions: List[Dict[str, Any]] = []

    def get_http_client(self) -> AdminHttpClient:
        return self.http_client

    def subscribe(self, message: Dict[str, Any]) -> None:
        self.subscriptions.append(message)

    def on(self, event_name: str, callback: EventCallback) -> Unsubscribe:
        return self.emitter.on(event_name, callback)

    def dispatch(self, envelope: Dict[str, Any]) -> int:
        return self.emitter.dispatch(envelope)


async def main() -> None:
    if not config.get_secret_key():
        print("No secret key found, set PAANJ_SECRET_KEY")
        return

    print(f"API URL: {config.get_api_url()}")

    admin = LocalAdmin()
    chat = AdminChat(admin)

    chat.users.on_create(lambda data: print(f"New user created: {data.get('userId')}"))
    chat.messages.on_create(lambda data: print(f"New message: {data.get('content')}"))
    chat.conversations.on_create(
        lambda data: print(f"New conversation: {data.get('id')}")
    )
    print(f"Subscribed to {len(admin.subscriptions)} event streams")

    try:
        user = await chat.users.get("user_123")
        print(f"User info: {user}")
    except httpx.HTTPStatusError as e:
        print(f"User not found: {e.response.status_code}")

    try:
        await chat.users.update("user_123", {"user_data": {"status": "active"}})
        print("User updated")
    except httpx.HTTPStatusError as e:
        print(f"Update failed: {e.response.status_code}")

    try:
        conversation = chat.conversation("conv_123")
        await conversation.send_message("Hello from admin!", {"priority": "high"})
        print("Message sent")
    except httpx.HTTPStatusError as e:
        print(f"Send message failed: {e.response.status_code}")

    # Events arrive as envelopes from the admin core's event channel
    admin.dispatch(
        {
            "type": "admin.event",
            "event": "message.create",
            "resource": "conversation",
            "resourceId": "conv_123",
            "data": {"content": "Hello from admin!"},
        }
    )


if __name__ == "__main__":
    asyncio.run(main())
