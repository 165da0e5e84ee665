"""Subscriber value object: a stream a connection receives from another one."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass
class Subscriber:
    """Reference to another connection's publisher, by its stream id.

    Subscribers read from a bare stream id are written back as one.
    """

    stream_id: str
    created_at: Optional[int] = None
    bare: bool = field(default=False, compare=False, repr=False)

    @property
    def publisher_stream_id(self) -> str:
        """Stream id of the publisher this subscriber receives."""
        return self.stream_id

    @classmethod
    def from_value(cls, value: Union[str, Dict[str, Any], "Subscriber"]) -> "Subscriber":
        """Build a subscriber from a bare stream id or a ``streamId`` mapping."""
        if isinstance(value, Subscriber):
            return value
        if isinstance(value, str):
            return cls(stream_id=value, bare=True)
        return cls(stream_id=value["streamId"], created_at=value.get("createdAt"))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"streamId": self.stream_id}
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        return data

    def to_value(self) -> Union[str, Dict[str, Any]]:
        """Serialize in the shape the subscriber was read from."""
        if self.bare and self.created_at is None:
            return self.stream_id
        return self.to_dict()
