"""Video platform adapters.

Each adapter provides:
- Platform-specific configuration (Config class)
- Value objects mirroring the platform's REST resources
- Builders turning raw payloads into those value objects
- FastAPI webhook receiver (create_app function)

Available adapters:
- openvidu: OpenVidu video conferencing
"""

from . import openvidu

__all__ = [
    "openvidu",
]
