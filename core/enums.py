"""Closed value sets used by OpenVidu sessions, recordings and connections.

Members are ``str`` subclasses so they compare equal to their wire values
and encode as plain strings in JSON.
"""

from enum import Enum


class MediaMode(str, Enum):
    """How media streams are transmitted between participants."""

    ROUTED = "ROUTED"
    RELAYED = "RELAYED"


class OutputMode(str, Enum):
    """How a recording is stored."""

    COMPOSED = "COMPOSED"
    COMPOSED_QUICK_START = "COMPOSED_QUICK_START"
    INDIVIDUAL = "INDIVIDUAL"


class RecordingLayout(str, Enum):
    """Video layout of a COMPOSED recording."""

    BEST_FIT = "BEST_FIT"
    PICTURE_IN_PICTURE = "PICTURE_IN_PICTURE"
    VERTICAL_PRESENTATION = "VERTICAL_PRESENTATION"
    HORIZONTAL_PRESENTATION = "HORIZONTAL_PRESENTATION"
    CUSTOM = "CUSTOM"


class RecordingMode(str, Enum):
    """Whether a session is recorded automatically."""

    ALWAYS = "ALWAYS"
    MANUAL = "MANUAL"


class OpenViduRole(str, Enum):
    """Role granted to a connection through its token."""

    SUBSCRIBER = "SUBSCRIBER"
    PUBLISHER = "PUBLISHER"
    MODERATOR = "MODERATOR"
