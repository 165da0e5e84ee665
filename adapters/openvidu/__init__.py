"""OpenVidu adapter: value objects, builders and webhook receiver."""

from .builders import RecordingBuilder, RecordingPropertiesBuilder, SessionPropertiesBuilder
from .config import OpenViduConfig
from .connection import Connection
from .publisher import Publisher
from .recording import Recording, RecordingProperties
from .registry import SessionRegistry
from .session_properties import SessionProperties
from .subscriber import Subscriber
from .webhook import create_app

__all__ = [
    "OpenViduConfig",
    "Connection",
    "Publisher",
    "Subscriber",
    "Recording",
    "RecordingProperties",
    "SessionProperties",
    "RecordingBuilder",
    "RecordingPropertiesBuilder",
    "SessionPropertiesBuilder",
    "SessionRegistry",
    "create_app",
]
