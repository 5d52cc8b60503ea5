"""
Shared utility functions for the views
"""
import threading

import flet as ft

from core.notifier import Notifier


def close_dialog(page, dialog):
    """Close a dialog and update the page"""
    dialog.open = False
    page.update()


def run_in_background(target, *args):
    """Run slow work (network calls) off the UI event handler."""
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


class SnackBarNotifier(Notifier):
    """Notifier that shows messages as Flet snackbars."""

    def __init__(self, page: ft.Page):
        self.page = page

    def _show(self, message: str, bgcolor):
        self.page.open(ft.SnackBar(ft.Text(message, color="white"), bgcolor=bgcolor, duration=3000))
        self.page.update()

    def success(self, message: str):
        super().success(message)
        self._show(f"✅ {message}", ft.Colors.GREEN)

    def error(self, message: str):
        super().error(message)
        self._show(f"❌ {message}", ft.Colors.RED)
