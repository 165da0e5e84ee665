"""Core modules shared across platform adapters."""

from .base_config import BaseConfig
from .enums import MediaMode, OpenViduRole, OutputMode, RecordingLayout, RecordingMode

__all__ = [
    "BaseConfig",
    "MediaMode",
    "OpenViduRole",
    "OutputMode",
    "RecordingLayout",
    "RecordingMode",
]
