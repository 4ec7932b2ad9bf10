"""Helper functions for the message boxes shown by the player window."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    QMessageBox.information(parent, title, message)


def ask_retry(parent: QWidget, title: str, message: str) -> bool:
    """Ask whether a failed submission should be sent again.

    Returns:
        True if the user chose to retry, False to keep waiting
    """
    reply = QMessageBox.question(
        parent,
        title,
        f"{message}\n\nTry again?",
        QMessageBox.Retry | QMessageBox.Cancel,
        QMessageBox.Retry,
    )
    return reply == QMessageBox.Retry
