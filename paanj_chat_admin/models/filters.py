from typing import Dict, Optional

from paanj_chat_admin.models.base import WireModel


class ListFilters(WireModel):
    """Base for list filters.

    Declares no fields itself: each subclass declares its own, in the order
    they appear in the query string.
    """

    def to_query_params(self) -> Dict[str, str]:
        """Return query parameters for the filters that are set.

        Unset filters are left out entirely instead of being sent empty. Zero
        counts as set.
        """
        return {
            key: str(value)
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }


class UserFilters(ListFilters):
    email: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ConversationFilters(ListFilters):
    user_id: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
