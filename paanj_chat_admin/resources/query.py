"""
Chainable list queries.

    conversations = await (
        chat.conversations.query().user_id("u1").limit(10).page(2).execute()
    )

Setters mutate the query and return it, so they compose in any order. Nothing
is sent until ``execute()``, and every ``execute()`` sends a fresh request.
"""

from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

from paanj_chat_admin import config
from paanj_chat_admin.exceptions import InvalidArgumentError
from paanj_chat_admin.models.conversations import Conversation
from paanj_chat_admin.models.filters import (
    ConversationFilters,
    ListFilters,
    UserFilters,
)
from paanj_chat_admin.models.users import User

FiltersType = TypeVar("FiltersType", bound=ListFilters)
ModelType = TypeVar("ModelType")
QueryType = TypeVar("QueryType", bound="ListQuery[Any, Any]")


def _require_int(value: Any, argument: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {value!r}", argument, value
        )
    if value < minimum:
        raise InvalidArgumentError(
            f"{argument} must be at least {minimum}", argument, value
        )
    return value


class ListQuery(Generic[FiltersType, ModelType]):
    """Accumulates list filters until ``execute()`` runs the list request."""

    def __init__(
        self,
        execute: Callable[[FiltersType], Awaitable[List[ModelType]]],
        filters: FiltersType,
        page_size: Optional[int] = None,
    ):
        self._execute = execute
        # Copy so chaining never mutates the caller's filters
        self._filters = filters.model_copy()
        self.page_size = page_size or config.get_default_page_size()

    @property
    def filters(self) -> FiltersType:
        return self._filters.model_copy()

    def limit(self: QueryType, limit: int) -> QueryType:
        self._filters.limit = _require_int(limit, "limit", 1)
        return self

    def offset(self: QueryType, offset: int) -> QueryType:
        self._filters.offset = _require_int(offset, "offset", 0)
        return self

    def page(self: QueryType, page: int) -> QueryType:
        """Set ``offset`` to the start of 1-based ``page``.

        Uses the limit set so far, or the default page size when there is none.
        A later ``offset()`` call overrides this.
        """
        page = _require_int(page, "page", 1)
        limit = self._filters.limit or self.page_size
        self._filters.offset = (page - 1) * limit
        return self

    async def execute(self) -> List[ModelType]:
        return await self._execute(self.filters)


class UserQuery(ListQuery[UserFilters, User]):
    def email(self, email: str) -> "UserQuery":
        self._filters.email = email
        return self


class ConversationQuery(ListQuery[ConversationFilters, Conversation]):
    def user_id(self, user_id: str) -> "ConversationQuery":
        self._filters.user_id = user_id
        return self
