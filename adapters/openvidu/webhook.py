"""FastAPI webhook receiver for OpenVidu server events."""

import logging
from typing import Any, Callable, Dict

from fastapi import FastAPI, HTTPException, Request

from .builders import RecordingBuilder
from .config import OpenViduConfig
from .connection import Connection
from .publisher import Publisher
from .registry import SessionRegistry
from .subscriber import Subscriber

logger = logging.getLogger(__name__)


def _participant_id(event: Dict[str, Any]) -> str:
    """Connection id of the participant an event refers to.

    Older OpenVidu releases call it ``participantId``.
    """
    if "connectionId" in event:
        return event["connectionId"]
    return event["participantId"]


def create_app(config: OpenViduConfig, registry: SessionRegistry | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration
        registry: Registry to update, a new one seeded with the configured
            session defaults if omitted

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="OpenVidu Adapter",
        description="Receives OpenVidu webhook events and tracks sessions and connections",
        version="0.1.0",
    )

    if registry is None:
        registry = SessionRegistry(config.get_session_defaults())
    app.state.registry = registry

    def on_session_created(event: Dict[str, Any]):
        registry.create_session(event["sessionId"])

    def on_session_destroyed(event: Dict[str, Any]):
        registry.destroy_session(event["sessionId"])

    def on_participant_joined(event: Dict[str, Any]):
        connection = Connection.from_dict({
            "connectionId": _participant_id(event),
            "createdAt": event.get("timestamp"),
            "location": event.get("location"),
            "platform": event.get("platform"),
            "serverData": event.get("serverData"),
            "clientData": event.get("clientData"),
        })
        registry.add_connection(event["sessionId"], connection)

    def on_participant_left(event: Dict[str, Any]):
        connection_id = _participant_id(event)
        if registry.remove_connection(event["sessionId"], connection_id) is None:
            logger.warning(f"participantLeft for unknown connection {connection_id}")

    def on_webrtc_connection_created(event: Dict[str, Any]):
        connection_id = _participant_id(event)
        connection = registry.get_connection(event["sessionId"], connection_id)
        if connection is None:
            logger.warning(f"webrtcConnectionCreated for unknown connection {connection_id}")
            return

        if event.get("connection") == "OUTBOUND":
            connection.publish(Publisher(
                stream_id=event["streamId"],
                created_at=event.get("timestamp"),
                has_audio=event.get("audioEnabled"),
                has_video=event.get("videoEnabled"),
                frame_rate=event.get("videoFramerate"),
                type_of_video=event.get("videoSource"),
                video_dimensions=event.get("videoDimensions"),
            ))
        else:
            connection.subscribe(Subscriber(
                stream_id=event["streamId"],
                created_at=event.get("timestamp"),
            ))

    def on_webrtc_connection_destroyed(event: Dict[str, Any]):
        if event.get("connection") == "OUTBOUND":
            registry.force_unpublish(event["sessionId"], event["streamId"])
            return

        connection_id = _participant_id(event)
        connection = registry.get_connection(event["sessionId"], connection_id)
        if connection is None:
            logger.warning(f"webrtcConnectionDestroyed for unknown connection {connection_id}")
            return
        connection.unsubscribe(event["streamId"])

    def on_recording_status_changed(event: Dict[str, Any]):
        recording = RecordingBuilder.build({
            "createdAt": event.get("startTime"),
            "size": None,
            "duration": None,
            "url": None,
            **event,
        })
        registry.store_recording(recording)
        logger.info(f"Recording {recording.id} is now {event.get('status')}")

    handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {
        "sessionCreated": on_session_created,
        "sessionDestroyed": on_session_destroyed,
        "participantJoined": on_participant_joined,
        "participantLeft": on_participant_left,
        "webrtcConnectionCreated": on_webrtc_connection_created,
        "webrtcConnectionDestroyed": on_webrtc_connection_destroyed,
        "recordingStatusChanged": on_recording_status_changed,
    }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "openvidu-adapter"}

    @app.post(config.webhook_path)
    async def webhook_event(request: Request):
        """Handle an OpenVidu webhook event.

        Events that are not tracked are acknowledged and ignored.
        """
        try:
            event = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Body is not valid JSON")

        if not isinstance(event, dict):
            raise HTTPException(status_code=400, detail="Event must be a JSON object")

        event_name = event.get("event")
        if not isinstance(event_name, str):
            raise HTTPException(status_code=400, detail="Event name must be a string")

        handler = handlers.get(event_name)
        if handler is None:
            logger.info(f"Ignoring OpenVidu event: {event_name}")
            return {"status": "ok"}

        logger.info(f"Received OpenVidu event {event_name} for session {event.get('sessionId')}")
        try:
            handler(event)
        except KeyError as e:
            logger.warning(f"Malformed {event_name} event, missing key {e}")
            raise HTTPException(status_code=400, detail=f"Missing key in event: {e}")
        except TypeError as e:
            logger.warning(f"Malformed {event_name} event: {e}")
            raise HTTPException(status_code=400, detail=f"Malformed event: {e}")

        return {"status": "ok"}

    @app.get("/sessions/{session_id}")
    async def get_session(session_id: str):
        """Return a session's properties and connections."""
        properties = registry.get_session_properties(session_id)
        if properties is None:
            raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
        return {
            "sessionId": session_id,
            "properties": properties.to_dict(),
            "connections": [c.to_dict() for c in registry.get_connections(session_id)],
        }

    @app.get("/sessions/{session_id}/connections/{connection_id}")
    async def get_connection(session_id: str, connection_id: str):
        """Return one connection of a session."""
        connection = registry.get_connection(session_id, connection_id)
        if connection is None:
            raise HTTPException(status_code=404, detail=f"Unknown connection {connection_id}")
        return connection.to_dict()

    @app.get("/recordings/{recording_id}")
    async def get_recording(recording_id: str):
        """Return the last known state of a recording."""
        recording = registry.get_recording(recording_id)
        if recording is None:
            raise HTTPException(status_code=404, detail=f"Unknown recording {recording_id}")
        return recording.to_dict()

    return app
