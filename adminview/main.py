#!/usr/bin/env python3
"""AdminView - Main entry point"""

import sys
import logging
from PyQt6.QtWidgets import QApplication
from adminview.data.action_logs import InMemoryActionLogSource, load_action_logs
from adminview.ui.main_window import DashboardWindow
from adminview.ui.theme import apply_global_theme
from adminview.utils.config import load_config
from adminview.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Application entry point"""
    argv = sys.argv if argv is None else argv

    config = load_config()
    if len(argv) > 1:
        config.action_log_file = argv[1]

    setup_logging(config.log_dir, config.log_level)
    logger.info("=" * 60)
    logger.info("AdminView Starting")
    logger.info("=" * 60)
    logger.info(f"Configuration loaded: {config.app_name} v{config.version}")

    # Load action logs
    if config.action_log_file:
        try:
            source = load_action_logs(config.action_log_file)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load action logs from {config.action_log_file}: {e}",
                         exc_info=True)
            return 1
    else:
        source = InMemoryActionLogSource()
        logger.info("No action log file given; dashboard starts empty")

    app = QApplication(argv)
    app.setApplicationName(config.app_name)
    app.setOrganizationName(config.organization_name)
    apply_global_theme(app)
    logger.info("Qt application created")

    try:
        window = DashboardWindow(config, source)
        window.show()
        logger.info("Dashboard window displayed")
    except Exception as e:
        logger.error(f"Failed to create dashboard window: {e}", exc_info=True)
        return 1

    logger.info("Starting Qt event loop")
    exit_code = app.exec()
    logger.info(f"Application exiting with code: {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
