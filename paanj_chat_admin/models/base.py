from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models exchanged with the admin API.

    Attributes are snake_case in Python and camelCase on the wire. Fields the
    server adds later are kept rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    def to_wire(self, exclude_unset: bool = False) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict with camelCase keys, dropping ``None``s."""
        data: Dict[str, Any] = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=not exclude_unset,
            exclude_unset=exclude_unset,
        )
        return data
