"""Connection value object: one participant's link to an OpenVidu session."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .publisher import Publisher
from .subscriber import Subscriber


logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """A participant connected to a session.

    Attributes:
        connection_id: Identifier of the connection
        created_at: Time the connection was established, in UTC milliseconds
        role: Role of the connection (see ``OpenViduRole``)
        token: Token associated to the connection
        location: Geo location as ``"CITY, COUNTRY"`` (``"unknown"`` if it
            could not be located)
        platform: Description of the platform used by the participant
        server_data: Data set on the server side when the token was generated
        client_data: Data set on the client side when connecting
        publishers: Streams this connection publishes to the session
        subscribers: Streams this connection receives. Each one must match the
            ``stream_id`` of a publisher of some other connection; this object
            does not check that.
    """

    connection_id: str
    created_at: Optional[int]
    role: Optional[str]
    token: Optional[str]
    location: Optional[str]
    platform: Optional[str]
    server_data: Optional[str]
    client_data: Optional[str]
    publishers: List[Publisher]
    subscribers: List[Subscriber]

    def __post_init__(self):
        self.publishers = list(self.publishers)
        self.subscribers = [Subscriber.from_value(s) for s in self.subscribers]

    def __str__(self) -> str:
        return self.connection_id

    def publish(self, publisher: Publisher):
        """Add a publisher to this connection."""
        self.publishers.append(publisher)

    def subscribe(self, subscriber: Subscriber):
        """Add a subscriber to this connection."""
        self.subscribers.append(subscriber)

    def unpublish(self, stream_id: str):
        """Remove publishers based on their stream id.

        Args:
            stream_id: Stream id of the publishers to remove
        """
        self.publishers = [p for p in self.publishers if p.stream_id != stream_id]

    def unsubscribe(self, stream_id: str):
        """Remove subscribers based on the stream id of their publisher.

        Args:
            stream_id: Stream id of the publisher to stop receiving
        """
        if not self.subscribers:
            return
        self.subscribers = [
            s for s in self.subscribers if s.publisher_stream_id != stream_id
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the connection to a mapping with OpenVidu's camelCase keys.

        Keys whose value is None or an empty string are left out. The
        ``publishers`` key only appears when the connection publishes.
        Subscribers keep the shape they were read in: bare stream ids stay
        strings, mappings stay mappings.
        """
        data: Dict[str, Any] = {
            "connectionId": self.connection_id,
            "createdAt": self.created_at,
            "role": self.role,
            "token": self.token,
            "location": self.location,
            "platform": self.platform,
            "serverData": self.server_data,
            "clientData": self.client_data,
            "subscribers": [s.to_value() for s in self.subscribers],
        }
        if self.publishers:
            data["publishers"] = [p.to_dict() for p in self.publishers]

        return {
            key: value
            for key, value in data.items()
            if value is not None and value != ""
        }

    def to_json(self, **options) -> str:
        """Convert the connection to JSON.

        Args:
            **options: Passed through to ``json.dumps`` (e.g. ``indent=2``)
        """
        return json.dumps(self.to_dict(), **options)

    def update_from_dict(self, data: Mapping[str, Any]) -> "Connection":
        """Overwrite this connection's fields from a mapping, in place.

        Scalar fields missing from ``data`` become None. ``subscribers`` is
        only replaced when present; a null ``subscribers`` value clears the
        list. Publishers are not read back.

        The same object is returned, so every holder of a reference to it
        sees the update.

        Raises:
            KeyError: If ``connectionId`` is missing
        """
        self.connection_id = data["connectionId"]
        self.created_at = data.get("createdAt")
        self.role = data.get("role")
        self.token = data.get("token")
        self.location = data.get("location")
        self.platform = data.get("platform")
        self.server_data = data.get("serverData")
        self.client_data = data.get("clientData")

        if "subscribers" in data:
            self.subscribers = [
                Subscriber.from_value(s) for s in data["subscribers"] or []
            ]

        logger.debug(f"Updated connection {self.connection_id} from mapping")
        return self

    def update_from_json(self, text: str) -> "Connection":
        """Overwrite this connection's fields from JSON text, in place."""
        return self.update_from_dict(json.loads(text))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Connection":
        """Build a new connection from a mapping.

        Raises:
            KeyError: If ``connectionId`` is missing
        """
        connection = cls(data["connectionId"], None, None, None, None, None, None, None, [], [])
        return connection.update_from_dict(data)

    @classmethod
    def from_json(cls, text: str) -> "Connection":
        """Build a new connection from JSON text."""
        return cls.from_dict(json.loads(text))
