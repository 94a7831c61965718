"""Allow running PomoBuddy as a module: python -m pomobuddy."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .app import PomoBuddyApp


LOG_LEVEL_ENV_VAR = "POMOBUDDY_LOG_LEVEL"


def setup_logging() -> logging.Logger:
    """Configure logging for the application."""
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomobuddy")


def main() -> None:
    logger = setup_logging()
    settings = load_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("PomoBuddy")
    app.setOrganizationName("PomoBuddy")

    window = PomoBuddyApp(settings)
    window.show()
    logger.info("PomoBuddy ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
