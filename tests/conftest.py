import json
from itertools import count
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from paanj_chat_admin.admin_chat import AdminChat
from paanj_chat_admin.clients.base_admin_client import EventCallback
from paanj_chat_admin.clients.event_emitter import EventEmitter
from paanj_chat_admin.clients.http_client import AdminHttpClient
from paanj_chat_admin.models.events import Unsubscribe


class FakeAdmin:
    """Admin core double.

    Records subscription control messages and routes events through a real
    ``EventEmitter`` so tests can simulate the server pushing envelopes.
    """

    def __init__(self, http_client: Any):
        self.http_client = http_client
        self.emitter = EventEmitter()
        self.control_messages: List[Dict[str, Any]] = []

    def get_http_client(self) -> Any:
        return self.http_client

    def subscribe(self, message: Dict[str, Any]) -> None:
        self.control_messages.append(message)

    def on(self, event_name: str, callback: EventCallback) -> Unsubscribe:
        return self.emitter.on(event_name, callback)

    def push(
        self,
        event: str,
        data: Any,
        resource: str = "global",
        resource_id: Optional[str] = None,
    ) -> int:
        """Simulate an event envelope arriving from the server."""
        return self.emitter.dispatch(
            {
                "type": "admin.event",
                "event": event,
                "resource": resource,
                "resourceId": resource_id,
                "data": data,
            }
        )


class InMemoryAdminApi:
    """Minimal admin API served through ``httpx.MockTransport``.

    Supports user CRUD and listing under ``/admin/users``. Every handled
    request is appended to ``requests``.
    """

    def __init__(self) -> None:
        self.users: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self._ids = count(1)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if parts[:2] != ["admin", "users"]:
            return httpx.Response(404, json={"error": "Not found"})

        if len(parts) == 2 and request.method == "POST":
            user_id = f"user_{next(self._ids)}"
            body = json.loads(request.content)
            user = {"userId": user_id, **body}
            self.users[user_id] = user
            return httpx.Response(201, json=user)

        if len(parts) == 2 and request.method == "GET":
            users = list(self.users.values())
            email = request.url.params.get("email")
            if email:
                users = [user for user in users if user["email"] == email]
            offset = int(request.url.params.get("offset", 0))
            limit = int(request.url.params.get("limit", 50))
            return httpx.Response(200, json=users[offset : offset + limit])

        user_id = parts[2]
        if user_id not in self.users:
            return httpx.Response(404, json={"error": "User not found"})

        if request.method == "GET":
            return httpx.Response(200, json=self.users[user_id])
        if request.method == "PATCH":
            self.users[user_id].update(json.loads(request.content))
            return httpx.Response(200, json=self.users[user_id])
        if request.method == "DELETE":
            del self.users[user_id]
            return httpx.Response(204)

        return httpx.Response(405)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env from leaking into the tests."""
    for name in (
        "PAANJ_API_URL",
        "PAANJ_SECRET_KEY",
        "PAANJ_HTTP_TIMEOUT",
        "PAANJ_ADMIN_BASE_PATH",
        "PAANJ_DEFAULT_PAGE_SIZE",
        "PAANJ_RELEASE_SERVER_SUBSCRIPTIONS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def http_client() -> MagicMock:
    """HTTP client double whose request() resolves to None by default."""
    mock_client = MagicMock()
    mock_client.request = AsyncMock(return_value=None)
    return mock_client


@pytest.fixture
def admin(http_client: MagicMock) -> FakeAdmin:
    return FakeAdmin(http_client)


@pytest.fixture
def chat(admin: FakeAdmin) -> AdminChat:
    return AdminChat(admin)


@pytest.fixture
def api() -> InMemoryAdminApi:
    return InMemoryAdminApi()


@pytest.fixture
def api_chat(api: InMemoryAdminApi) -> AdminChat:
    """AdminChat talking HTTP to the in-memory API."""
    http = AdminHttpClient(
        base_url="http://admin.test",
        api_key="sk_test",
        transport=httpx.MockTransport(api.handler),
    )
    return AdminChat(FakeAdmin(http))
