"""Base configuration management for the OpenVidu adapter."""

import os

from dotenv import load_dotenv


class BaseConfig:
    """Base configuration class with common server settings.

    Subclasses should extend this to add platform-specific settings.
    """

    def __init__(self, env_file: str | None = None):
        """Load configuration from .env file.

        Args:
            env_file: Optional path to .env file
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        # Server settings
        self.host = os.getenv("HOST", "0.0.0.0")
        try:
            self.port = int(os.getenv("PORT", "5080"))
        except ValueError:
            raise ValueError(f"PORT must be an integer, got: {os.getenv('PORT')}") from None

        # Logging level
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
