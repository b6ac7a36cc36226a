"""Command-line entry point: ``python -m rpg_adventure`` or ``rpg-adventure``."""

from __future__ import annotations

import sys

from rpg_adventure.core.config import get_settings
from rpg_adventure.core.logging import configure_logging, get_logger
from rpg_adventure.ui.game import GameManager


CRITICAL_ERROR_MESSAGE = "A critical error occurred. The application will now close."


def main() -> int:
    """Run the game.

    Returns:
        Process exit code: 0 on a normal exit, 1 after a critical error.
    """
    logger = get_logger(__name__)
    try:
        settings = get_settings()
        configure_logging(
            level=settings.effective_log_level,
            json_format=settings.log_json,
            log_file=settings.log_file,
        )
        logger.info("Starting", app=settings.app_name, version=settings.app_version)
        GameManager.from_settings(settings).run()
    except KeyboardInterrupt:
        print()
        return 130
    except Exception:
        logger.exception("Unhandled error, shutting down")
        print(CRITICAL_ERROR_MESSAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
