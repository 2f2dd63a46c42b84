"""Error and interrupt reporting for gtm commands."""

from __future__ import annotations

import logging

import typer

from gtm.utils.log_setup import display_error_summary, display_warning_summary

logger = logging.getLogger(__name__)

# Exit status of a process stopped by SIGINT
INTERRUPTED_EXIT_CODE = 130


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Print an error summary to stderr.

	The exception text is added as a details line only when it says more than
	``message`` does. Its traceback goes to the debug log.

	"""
	if exception is not None:
		logger.debug("%s failed", type(exception).__name__, exc_info=exception)
		details = str(exception)
		if details and details != message:
			message = f"{message}\n\nDetails: {details}"
	display_error_summary(message)


def show_warning(message: str) -> None:
	display_warning_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> None:
	"""Print an error summary and stop the command with ``exit_code``."""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> None:
	show_warning("Interrupted, nothing further was written.")
	raise typer.Exit(INTERRUPTED_EXIT_CODE)
