"""Shared pytest fixtures for OpenVidu adapter tests."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from adapters.openvidu.config import OpenViduConfig
from adapters.openvidu.connection import Connection
from adapters.openvidu.publisher import Publisher
from adapters.openvidu.registry import SessionRegistry
from adapters.openvidu.subscriber import Subscriber
from adapters.openvidu.webhook import create_app


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment of all adapter-related variables."""
    env_vars = [
        "HOST", "PORT", "LOG_LEVEL", "WEBHOOK_PATH",
        "OPENVIDU_MEDIA_MODE", "OPENVIDU_RECORDING_MODE",
        "OPENVIDU_DEFAULT_OUTPUT_MODE", "OPENVIDU_DEFAULT_RECORDING_LAYOUT",
        "OPENVIDU_DEFAULT_CUSTOM_LAYOUT",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def full_env(clean_env):
    """Full environment with all settings."""
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", "9000")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("WEBHOOK_PATH", "/openvidu/events")
    clean_env.setenv("OPENVIDU_MEDIA_MODE", "relayed")
    clean_env.setenv("OPENVIDU_RECORDING_MODE", "ALWAYS")
    clean_env.setenv("OPENVIDU_DEFAULT_OUTPUT_MODE", "INDIVIDUAL")
    clean_env.setenv("OPENVIDU_DEFAULT_RECORDING_LAYOUT", "CUSTOM")
    clean_env.setenv("OPENVIDU_DEFAULT_CUSTOM_LAYOUT", "layouts/grid")
    return clean_env


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def minimal_config(clean_env):
    """Config with default settings."""
    return OpenViduConfig()


@pytest.fixture
def full_config(full_env):
    """Config with all settings."""
    return OpenViduConfig()


# =============================================================================
# Connection Fixtures
# =============================================================================

@pytest.fixture
def connection_data() -> Dict[str, Any]:
    """Connection mapping as returned by the OpenVidu REST API."""
    return {
        "connectionId": "con_Xnxg19tonh",
        "createdAt": 1538481996019,
        "role": "PUBLISHER",
        "token": "wss://localhost:4443?sessionId=ses_YnDaGYNcd7&token=tok_AVe8o7iltWqtijyl",
        "location": "Madrid, Spain",
        "platform": "Chrome 85.0.4183.121 on Linux 64-bit",
        "serverData": "My Server Data",
        "clientData": "My Client Data",
        "subscribers": [
            {"streamId": "str_CAM_KmAb_con_Rnd2ZpHm5G", "createdAt": 1538482000856},
        ],
    }


@pytest.fixture
def connection() -> Connection:
    """Fully populated connection with two publishers and two subscribers."""
    return Connection(
        "con_Xnxg19tonh",
        1538481996019,
        "PUBLISHER",
        "tok_AVe8o7iltWqtijyl",
        "Madrid, Spain",
        "Chrome 85.0.4183.121 on Linux 64-bit",
        "My Server Data",
        "My Client Data",
        [
            Publisher(stream_id="str_CAM_a", created_at=1538481999022, has_audio=True),
            Publisher(stream_id="str_SCR_b", created_at=1538482000000, has_video=True),
        ],
        [
            Subscriber("str_CAM_other"),
            Subscriber("str_SCR_other"),
        ],
    )


# =============================================================================
# Webhook Fixtures
# =============================================================================

@pytest.fixture
def registry() -> SessionRegistry:
    """Empty session registry."""
    return SessionRegistry()


@pytest.fixture
def test_client(minimal_config, registry):
    """FastAPI test client sharing the registry fixture."""
    app = create_app(minimal_config, registry)
    return TestClient(app)
