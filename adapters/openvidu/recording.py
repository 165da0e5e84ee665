"""Recording value objects."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.enums import MediaMode, OutputMode, RecordingLayout


@dataclass(frozen=True)
class RecordingProperties:
    """Parameters controlling how a session recording is composed and stored.

    Enum-typed fields hold either the enum member or the raw string received
    from the caller; values are not checked against the enum.
    """

    has_audio: bool = True
    has_video: bool = True
    name: str = RecordingLayout.BEST_FIT
    output_mode: str = OutputMode.COMPOSED
    recording_layout: str = RecordingLayout.BEST_FIT
    # Matches the upstream default; not a layout name.
    custom_layout: Optional[str] = MediaMode.ROUTED
    resolution: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "hasAudio": self.has_audio,
            "hasVideo": self.has_video,
            "name": self.name,
            "outputMode": self.output_mode,
            "recordingLayout": self.recording_layout,
            "customLayout": self.custom_layout,
            "resolution": self.resolution,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Recording:
    """A recording of a session as reported by OpenVidu.

    Attributes:
        id: Recording identifier
        session_id: Session the recording belongs to
        created_at: Start time in UTC milliseconds
        size: Size of the recording file in bytes
        duration: Duration in seconds
        url: Download URL, available once the recording is ready
        properties: Parameters the recording was started with
    """

    id: str
    session_id: str
    created_at: Optional[int]
    size: Optional[int]
    duration: Optional[float]
    url: Optional[str]
    properties: RecordingProperties

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "sessionId": self.session_id,
            "createdAt": self.created_at,
            "size": self.size,
            "duration": self.duration,
            "url": self.url,
        }
        data.update(self.properties.to_dict())
        return data
