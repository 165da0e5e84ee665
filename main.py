#!/usr/bin/env python3
"""Main entry point for the OpenVidu adapter.

Runs the webhook receiver:
    python main.py
"""

import sys
import logging
import uvicorn


def setup_logging(level: str = "INFO"):
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """Load configuration and serve the webhook receiver."""
    from adapters.openvidu import OpenViduConfig, create_app

    if len(sys.argv) > 1 and sys.argv[1] in ("--help", "-h"):
        print("Usage: openvidu-adapter")
        print("\nConfigured through HOST, PORT, LOG_LEVEL, WEBHOOK_PATH and OPENVIDU_* variables.")
        sys.exit(0)

    try:
        config = OpenViduConfig()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"Webhook path: {config.webhook_path}")
    logger.info(f"Session defaults: {config.get_session_defaults()}")

    app = create_app(config)

    logger.info(f"Starting OpenVidu adapter on {config.host}:{config.port}")
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
