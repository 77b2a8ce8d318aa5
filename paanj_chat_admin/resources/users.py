import re
from typing import Any, Mapping, Optional, Union

from paanj_chat_admin.exceptions import InvalidArgumentError
from paanj_chat_admin.models.filters import UserFilters
from paanj_chat_admin.models.users import CreateUserData, User, UserUpdate
from paanj_chat_admin.resources.admin_user_context import AdminUserContext
from paanj_chat_admin.resources.base_resource import (
    CrudResource,
    path_segment,
    require_id,
)
from paanj_chat_admin.resources.query import UserQuery

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


def parse_numeric_user_id(value: Union[str, int], argument: str = "blocked_id") -> int:
    """Convert a user id to the integer form the block endpoints expect."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{argument} must be an integer id", argument, value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _NUMERIC_ID.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidArgumentError(
        f"{argument} must be an integer id, got {value!r}", argument, value
    )


class UsersResource(CrudResource[User, CreateUserData, UserUpdate, UserFilters]):
    """Manage and monitor users.

    Calling the resource returns an ``AdminUserContext``, so both
    ``users.get("u1")`` and ``users("12").block("34")`` work on one instance.
    """

    collection = "users"
    model_class = User
    create_class = CreateUserData
    update_class = UserUpdate
    filters_class = UserFilters
    event_prefix = "user"

    def query(
        self, filters: Optional[Union[UserFilters, Mapping[str, Any]]] = None
    ) -> UserQuery:
        """Start a chainable list query, e.g. ``users.query().limit(10).page(3)``."""
        return UserQuery(self.list, self._coerce_filters(filters))

    async def block(self, blocker_id: str, blocked_id: Union[str, int]) -> None:
        """Block a user on behalf of another user.

        Args:
            blocker_id: ID of the user who is blocking
            blocked_id: ID of the user to be blocked; must be an integer or a
                string holding one

        Raises:
            InvalidArgumentError: If ``blocked_id`` is not numeric. No request
                is sent in that case.
        """
        await self._block_action("block", blocker_id, blocked_id)

    async def unblock(self, blocker_id: str, blocked_id: Union[str, int]) -> None:
        """Unblock a user on behalf of another user.

        Same argument rules as ``block``.
        """
        await self._block_action("unblock", blocker_id, blocked_id)

    def as_context(self, blocker_id: str) -> AdminUserContext:
        """Return block operations bound to ``blocker_id``."""
        return AdminUserContext(self.admin, require_id(blocker_id, "blocker_id"), self)

    def __call__(self, blocker_id: str) -> AdminUserContext:
        return self.as_context(blocker_id)

    async def _block_action(
        self, action: str, blocker_id: str, blocked_id: Union[str, int]
    ) -> None:
        blocker = path_segment(blocker_id, "blocker_id")
        payload = {"blockedUserId": parse_numeric_user_id(blocked_id)}
        await self._request("POST", f"/{self.collection}/{blocker}/{action}", payload)
