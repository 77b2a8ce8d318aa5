from typing import TYPE_CHECKING, Union

from paanj_chat_admin.clients.base_admin_client import AdminCore

if TYPE_CHECKING:
    from paanj_chat_admin.resources.users import UsersResource


class AdminUserContext:
    """Block operations performed on behalf of one user.

    Binds a blocker id so callers can write ``context.block("42")`` instead of
    repeating the blocker on every call.
    """

    def __init__(
        self, admin: AdminCore, blocker_id: str, users_resource: "UsersResource"
    ):
        self.admin = admin
        self._blocker_id = blocker_id
        self.users_resource = users_resource

    @property
    def blocker_id(self) -> str:
        return self._blocker_id

    async def block(self, blocked_id: Union[str, int]) -> None:
        """Block ``blocked_id`` on behalf of the bound user."""
        await self.users_resource.block(self._blocker_id, blocked_id)

    async def unblock(self, blocked_id: Union[str, int]) -> None:
        """Unblock ``blocked_id`` on behalf of the bound user."""
        await self.users_resource.unblock(self._blocker_id, blocked_id)
