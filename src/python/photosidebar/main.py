"""
Main entry point for the Photo Sidebar application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from .config import CONFIG
from .services.config_service import ConfigService
from .ui.main_window import MainWindow


def main():
    """Main application entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(CONFIG["APP_NAME"])

    config_service = ConfigService()

    window = MainWindow(config_service)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
