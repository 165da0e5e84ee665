"""Publisher value object: one media stream a connection sends to a session."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


# Python attribute -> OpenVidu camelCase key
_FIELDS = {
    "stream_id": "streamId",
    "created_at": "createdAt",
    "has_audio": "hasAudio",
    "has_video": "hasVideo",
    "audio_active": "audioActive",
    "video_active": "videoActive",
    "frame_rate": "frameRate",
    "type_of_video": "typeOfVideo",
    "video_dimensions": "videoDimensions",
}


@dataclass
class Publisher:
    """A stream published by a connection, uniquely identified by ``stream_id``."""

    stream_id: str
    created_at: Optional[int] = None
    has_audio: Optional[bool] = None
    has_video: Optional[bool] = None
    audio_active: Optional[bool] = None
    video_active: Optional[bool] = None
    frame_rate: Optional[int] = None
    type_of_video: Optional[str] = None
    video_dimensions: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Publisher":
        """Build a publisher from an OpenVidu publisher mapping.

        The REST API nests the media flags under ``mediaOptions``; a flat
        mapping (as produced by ``to_dict``) is accepted as well.

        Raises:
            KeyError: If ``streamId`` is missing
        """
        flat = dict(data.get("mediaOptions") or {})
        flat.update({key: value for key, value in data.items() if key != "mediaOptions"})
        return cls(
            stream_id=flat["streamId"],
            **{
                attr: flat.get(key)
                for attr, key in _FIELDS.items()
                if attr != "stream_id"
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a flat camelCase mapping, omitting unset fields."""
        return {
            key: getattr(self, attr)
            for attr, key in _FIELDS.items()
            if getattr(self, attr) is not None
        }
