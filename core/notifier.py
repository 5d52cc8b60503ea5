# core/notifier.py
import logging

logger = logging.getLogger(__name__)


class Notifier:
    """
    Transient user notifications (toasts).

    Controllers receive one of these instead of reaching for the page; the
    Flet UI passes a snackbar-backed subclass, tests pass a mock.
    """

    def success(self, message: str):
        logger.info(message)

    def error(self, message: str):
        logger.warning(message)
