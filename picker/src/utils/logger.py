"""Global logging and error handling utilities"""
import sys
import logging
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None
_logger = logging.getLogger('picker')


def configure_logging(verbose: bool = False):
    """Configure root logging for an entry point (stdout, WARNING or DEBUG)"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Logs the message and raises the exception (full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    message = user_message if user_message else str(e)

    if DEBUG_MODE:
        _logger.error(f"{title}: {message}")
        raise e

    _logger.error(f"{title}: {message}\n{traceback.format_exc()}")
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    # Re-raise so the caller can handle it appropriately
    raise e
