"""Builders that turn loosely-typed OpenVidu mappings into value objects.

Every builder returns None when handed something that is not a mapping.
Keys that are present are used verbatim, even when their value is None or
False; absent keys fall back to the value object's defaults.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from .recording import Recording, RecordingProperties
from .session_properties import SessionProperties


logger = logging.getLogger(__name__)


# OpenVidu camelCase key -> value object attribute
RECORDING_PROPERTY_KEYS = {
    "hasAudio": "has_audio",
    "hasVideo": "has_video",
    "name": "name",
    "outputMode": "output_mode",
    "recordingLayout": "recording_layout",
    "customLayout": "custom_layout",
    "resolution": "resolution",
}

SESSION_PROPERTY_KEYS = {
    "mediaMode": "media_mode",
    "recordingMode": "recording_mode",
    "defaultOutputMode": "default_output_mode",
    "defaultRecordingLayout": "default_recording_layout",
    "customSessionId": "custom_session_id",
    "defaultCustomLayout": "default_custom_layout",
}


def _present_fields(properties: Mapping, keys: Dict[str, str]) -> Dict[str, Any]:
    """Pick the keyword arguments for the keys present in ``properties``."""
    return {attr: properties[key] for key, attr in keys.items() if key in properties}


class RecordingPropertiesBuilder:
    """Builds RecordingProperties from a mapping."""

    @staticmethod
    def build(properties: Any) -> Optional[RecordingProperties]:
        if not isinstance(properties, Mapping):
            logger.debug(
                f"Cannot build recording properties from {type(properties).__name__}"
            )
            return None
        return RecordingProperties(**_present_fields(properties, RECORDING_PROPERTY_KEYS))


class SessionPropertiesBuilder:
    """Builds SessionProperties from a mapping."""

    @staticmethod
    def build(properties: Any) -> Optional[SessionProperties]:
        if not isinstance(properties, Mapping):
            logger.debug(
                f"Cannot build session properties from {type(properties).__name__}"
            )
            return None
        return SessionProperties(**_present_fields(properties, SESSION_PROPERTY_KEYS))


class RecordingBuilder:
    """Builds a Recording, including its properties, from a mapping."""

    @staticmethod
    def build(properties: Any) -> Optional[Recording]:
        """Build a recording from an OpenVidu recording mapping.

        Args:
            properties: Mapping with ``id``, ``sessionId``, ``createdAt``,
                ``size``, ``duration`` and ``url`` plus any recording
                property keys

        Returns:
            Recording, or None if ``properties`` is not a mapping

        Raises:
            KeyError: If one of the identifying keys is missing
        """
        if not isinstance(properties, Mapping):
            logger.debug(f"Cannot build recording from {type(properties).__name__}")
            return None
        return Recording(
            id=properties["id"],
            session_id=properties["sessionId"],
            created_at=properties["createdAt"],
            size=properties["size"],
            duration=properties["duration"],
            url=properties["url"],
            properties=RecordingPropertiesBuilder.build(properties),
        )
