"""Interfaces consumed from the admin core.

The admin core owns the connection, authentication and the event channel.
The chat resources only need the three operations below, so any object that
provides them (the Paanj admin client, a test double) can back ``AdminChat``
without inheriting from anything here.
"""

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from paanj_chat_admin.models.events import Unsubscribe

EventCallback = Callable[[Any], None]


@runtime_checkable
class HttpClient(Protocol):
    """Issues authenticated requests against the admin API."""

    async def request(self, method: str, path: str, body: Optional[Any] = None) -> Any:
        """Send one HTTP request and return the parsed JSON body.

        Args:
            method: HTTP method, e.g. ``"GET"``
            path: Path relative to the API root, query string included
            body: JSON-serializable request body

        Returns:
            The decoded response body, or ``None`` when the response is empty.

        Raises whatever the transport raises for network or HTTP errors.
        """


@runtime_checkable
class AdminCore(Protocol):
    """A connected admin client."""

    def get_http_client(self) -> HttpClient:
        """Return the HTTP client bound to this admin connection."""

    def subscribe(self, message: Dict[str, Any]) -> None:
        """Send a subscription control message over the event channel."""

    def on(self, event_name: str, callback: EventCallback) -> Unsubscribe:
        """Register ``callback`` for ``event_name``.

        Returns:
            A function removing exactly this registration.
        """
