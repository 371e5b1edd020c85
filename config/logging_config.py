"""Logging configuration.

Sets up console logging for the object store service.
"""

import logging

from config.storage_config import StorageConfig
from services.settings_helpers import get_setting


def setup_console_logging() -> logging.Logger:
    """Set up console logging.

    Returns:
        The configured uvicorn logger.
    """
    console_level = get_setting("OBJECT_STORE_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, console_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return logging.getLogger("uvicorn")


def print_startup_info(config: StorageConfig, media_type_count: int) -> None:
    """Log the storage layout and listener settings at startup."""
    startup_logger = logging.getLogger("uvicorn")
    startup_logger.info(f"OBJECT_STORE_ROOT={config.root.resolve()}")
    startup_logger.info(f"Listening on {config.host}:{config.port}")
    startup_logger.info(
        f"OBJECT_STORE_MIME_TYPES_FILE={config.mime_types_file or 'not set'} "
        f"({media_type_count} media types known)"
    )
