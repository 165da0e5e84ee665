"""OpenVidu-specific configuration extending base config."""

import os
from enum import Enum
from typing import Optional, Type

from core.base_config import BaseConfig
from core.enums import MediaMode, OutputMode, RecordingLayout, RecordingMode

from .builders import SessionPropertiesBuilder
from .session_properties import SessionProperties


# Environment variable -> (session property key, allowed values)
SESSION_DEFAULT_VARS = {
    "OPENVIDU_MEDIA_MODE": ("mediaMode", MediaMode),
    "OPENVIDU_RECORDING_MODE": ("recordingMode", RecordingMode),
    "OPENVIDU_DEFAULT_OUTPUT_MODE": ("defaultOutputMode", OutputMode),
    "OPENVIDU_DEFAULT_RECORDING_LAYOUT": ("defaultRecordingLayout", RecordingLayout),
    "OPENVIDU_DEFAULT_CUSTOM_LAYOUT": ("defaultCustomLayout", None),
}


def _enum_value(name: str, value: str, enum_cls: Type[Enum]) -> Enum:
    try:
        return enum_cls(value.upper())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{name} must be one of {allowed}, got: {value}") from None


class OpenViduConfig(BaseConfig):
    """OpenVidu adapter configuration with platform-specific settings."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file.

        Args:
            env_file: Optional path to .env file
        """
        super().__init__(env_file)

        # Route receiving OpenVidu webhook events
        self.webhook_path = os.getenv("WEBHOOK_PATH", "/webhook")
        if not self.webhook_path.startswith("/"):
            raise ValueError(f"WEBHOOK_PATH must start with '/', got: {self.webhook_path}")

        # Defaults applied to sessions announced by sessionCreated events
        self.session_defaults = {}
        for name, (key, enum_cls) in SESSION_DEFAULT_VARS.items():
            value = os.getenv(name)
            if not value:
                continue
            self.session_defaults[key] = (
                _enum_value(name, value, enum_cls) if enum_cls else value
            )

    def get_session_defaults(self) -> SessionProperties:
        """Get the session properties configured through the environment."""
        return SessionPropertiesBuilder.build(self.session_defaults)
