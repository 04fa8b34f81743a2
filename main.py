#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Service Desk - Client & Service Management
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from repositories.database import Database
from repositories.seed import seed_database
from utils.logger import setup_logger
from ui.wizards.service_request import ServiceRequestWizard


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        if Config.DB_PATH.exists():
            logger.info(f"Using existing database: {Config.DB_PATH}")
        else:
            logger.info("No database found, will create fresh one")

        db = Database()
        db.initialize()
        logger.info(">> Database initialized successfully")

        if Config.SEED_DEMO_DATA and db.is_empty():
            seed_database(db)
            logger.info(">> Seeded demo customers and technicians")

        wizard = ServiceRequestWizard(db)
        wizard.request_saved.connect(
            lambda request: logger.info(f"Saved service request {request.job_id} ({request.ref_no})")
        )
        wizard.show()
        logger.info(">> Service request wizard displayed")

        exit_code = app.exec_()
        db.close()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
