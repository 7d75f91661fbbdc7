"""Helper functions for common dialog patterns in the quiz UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def show_warning(parent: QWidget | None, title: str, message: str) -> None:
    """Show warning dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Warning message
    """
    QMessageBox.warning(parent, title, message)
