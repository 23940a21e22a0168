"""Main application entry point.

Serves the NiceGUI chat page that talks to the chat/file API at
API_BASE_URL. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Registers the chat page and runs the NiceGUI server.
    """
    from nicegui import ui

    from src.config import get_client_config
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_client_config()

    logger.info(f"Starting {config.app_title} on http://localhost:{config.port}")
    logger.info(f"Using API at {config.api_base_url}")

    ui.run(
        title=config.app_title,
        favicon="🤖",
        host=config.host,
        port=config.port,
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
