"""Session properties value object."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.enums import MediaMode, OutputMode, RecordingLayout, RecordingMode


@dataclass(frozen=True)
class SessionProperties:
    """Session-wide configuration: media routing, recording policy and layout defaults."""

    media_mode: str = MediaMode.ROUTED
    recording_mode: str = RecordingMode.MANUAL
    default_output_mode: str = OutputMode.COMPOSED
    default_recording_layout: str = RecordingLayout.BEST_FIT
    custom_session_id: Optional[str] = None
    default_custom_layout: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with OpenVidu's camelCase keys, omitting unset optionals."""
        data = {
            "mediaMode": self.media_mode,
            "recordingMode": self.recording_mode,
            "defaultOutputMode": self.default_output_mode,
            "defaultRecordingLayout": self.default_recording_layout,
            "customSessionId": self.custom_session_id,
            "defaultCustomLayout": self.default_custom_layout,
        }
        return {key: value for key, value in data.items() if value is not None}
