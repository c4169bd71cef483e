"""Logging and error helpers shared by the add-in commands and core.

Messages go through the standard logging module under config.LOGGER_NAME,
so the host adapter decides where they end up (text command window, log
file). In DEBUG mode they are also echoed to the console.
"""

import logging
import traceback

from ... import config

_logger = logging.getLogger(config.LOGGER_NAME)


def log(message: str, level: int = logging.INFO, force_console: bool = False) -> None:
    """Log a message, echoing it to the console in DEBUG mode."""
    if config.DEBUG or force_console:
        print(message)
    _logger.log(level, message)


def handle_error(name: str, show_message_box: bool = False) -> None:
    """Log the exception currently being handled, with its traceback.

    Call from inside an ``except`` block of a host-facing entry point.
    """
    log('===== Error =====', logging.ERROR)
    log(f'{name}\n{traceback.format_exc()}', logging.ERROR)

    if show_message_box:
        # No message box outside the host: surface it on the console instead
        print(f'{name}\n{traceback.format_exc()}')
