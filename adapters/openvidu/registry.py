"""In-memory registry of sessions, connections and recordings."""

import logging
from typing import Dict, List, Optional

from .connection import Connection
from .recording import Recording
from .session_properties import SessionProperties


logger = logging.getLogger(__name__)


class SessionRegistry:
    """Tracks the sessions announced by OpenVidu and their connections.

    Keeps the subscriber invariant for the connections it holds: when a
    stream stops being published, every connection of the session stops
    subscribing to it.
    """

    def __init__(self, default_properties: Optional[SessionProperties] = None):
        """Initialize registry.

        Args:
            default_properties: Properties for sessions created without any
        """
        self.default_properties = default_properties or SessionProperties()
        self.sessions: Dict[str, SessionProperties] = {}
        self.connections: Dict[str, Dict[str, Connection]] = {}
        self.recordings: Dict[str, Recording] = {}

    def has_session(self, session_id: str) -> bool:
        return session_id in self.sessions

    def create_session(
        self,
        session_id: str,
        properties: Optional[SessionProperties] = None
    ) -> SessionProperties:
        """Register a session, replacing the properties of a known one.

        Args:
            session_id: Session identifier
            properties: Session properties, registry defaults if omitted

        Returns:
            The properties stored for the session
        """
        self.sessions[session_id] = properties or self.default_properties
        self.connections.setdefault(session_id, {})
        logger.info(f"Registered session {session_id}")
        return self.sessions[session_id]

    def destroy_session(self, session_id: str) -> bool:
        """Forget a session with all of its connections and recordings.

        Returns:
            True if the session was known
        """
        if session_id not in self.sessions:
            return False
        del self.sessions[session_id]
        dropped = self.connections.pop(session_id, {})
        self.recordings = {
            recording_id: recording
            for recording_id, recording in self.recordings.items()
            if recording.session_id != session_id
        }
        logger.info(f"Destroyed session {session_id} ({len(dropped)} connections dropped)")
        return True

    def get_session_properties(self, session_id: str) -> Optional[SessionProperties]:
        return self.sessions.get(session_id)

    def add_connection(self, session_id: str, connection: Connection):
        """Add a connection, registering the session if it is unknown."""
        if session_id not in self.sessions:
            self.create_session(session_id)
        self.connections[session_id][connection.connection_id] = connection
        logger.debug(f"Added connection {connection} to session {session_id}")

    def remove_connection(self, session_id: str, connection_id: str) -> Optional[Connection]:
        """Remove a connection and unsubscribe the session from its streams.

        Returns:
            The removed connection, or None if it was not tracked
        """
        connection = self.connections.get(session_id, {}).pop(connection_id, None)
        if connection is None:
            return None

        for publisher in connection.publishers:
            for other in self.connections[session_id].values():
                other.unsubscribe(publisher.stream_id)

        logger.debug(f"Removed connection {connection_id} from session {session_id}")
        return connection

    def get_connection(self, session_id: str, connection_id: str) -> Optional[Connection]:
        return self.connections.get(session_id, {}).get(connection_id)

    def get_connections(self, session_id: str) -> List[Connection]:
        return list(self.connections.get(session_id, {}).values())

    def force_unpublish(self, session_id: str, stream_id: str) -> bool:
        """Stop a stream: remove its publisher and every subscriber to it.

        Args:
            session_id: Session the stream belongs to
            stream_id: Stream id of the publisher

        Returns:
            True if a connection of the session was publishing the stream
        """
        found = False
        for connection in self.get_connections(session_id):
            if any(p.stream_id == stream_id for p in connection.publishers):
                found = True
            connection.unpublish(stream_id)
            connection.unsubscribe(stream_id)

        if found:
            logger.info(f"Unpublished stream {stream_id} in session {session_id}")
        else:
            logger.debug(f"No publisher for stream {stream_id} in session {session_id}")
        return found

    def store_recording(self, recording: Recording):
        self.recordings[recording.id] = recording
        logger.debug(f"Stored recording {recording.id} of session {recording.session_id}")

    def get_recording(self, recording_id: str) -> Optional[Recording]:
        return self.recordings.get(recording_id)
