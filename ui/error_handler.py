# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

import sqlite3

from PyQt5.QtWidgets import QWidget, QMessageBox

from services.exceptions import ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_exception(error: Exception) -> str:
    """
    Map an exception to a message fit for the user.

    Technical details are logged only.
    """
    if isinstance(error, ValidationException):
        if error.errors:
            return "\n".join(f"• {e}" for e in error.errors)
        return error.message

    if isinstance(error, sqlite3.Error):
        return "The database could not be updated. Please try again."

    return "An unexpected error occurred."


class ErrorHandler:
    """Centralized error handler that maps exceptions to message boxes."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show dialog.

        Args:
            error: The exception to handle
            parent: Parent widget for dialog
            context: What was being done (e.g., "save service request")
            show_dialog: Whether to show dialog to user

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = map_exception(error)

        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Error"):
        QMessageBox.critical(parent, title, message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = "Warning"):
        QMessageBox.warning(parent, title, message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = "Success"):
        QMessageBox.information(parent, title, message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = "Confirm") -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(parent, title, message,
                                     QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        return reply == QMessageBox.Yes
