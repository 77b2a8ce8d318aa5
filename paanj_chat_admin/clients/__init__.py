from .base_admin_client import AdminCore, EventCallback, HttpClient
from .event_emitter import EventEmitter
from .http_client import AdminHttpClient

__all__ = [
    "AdminCore",
    "AdminHttpClient",
    "EventCallback",
    "EventEmitter",
    "HttpClient",
]
