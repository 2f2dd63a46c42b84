"""
Logging setup for gtm.

Diagnostics are written to stderr through rich so that report text on
stdout is never mixed with log output. With ``--save-log`` they are also
appended to the ledger's log file.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def setup_logging(is_verbose: bool = False, log_file_path: Path | str | None = None) -> None:
	"""
	Configure the root logger for a gtm invocation.

	Handlers from an earlier call are replaced, so calling it twice does not
	duplicate output.

	Args:
	    is_verbose: Show debug messages on the console
	    log_file_path: Ledger log file to append every message to (optional)

	"""
	level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	root_logger.addHandler(
		RichHandler(level=level, console=console, rich_tracebacks=True, show_time=is_verbose, show_path=is_verbose)
	)
	root_logger.setLevel(level)

	if log_file_path is None:
		return

	try:
		file_handler = logging.FileHandler(Path(log_file_path), mode="a", encoding="utf-8")
	except OSError as e:
		root_logger.warning("Could not open %s for logging: %s", log_file_path, e)
		return

	file_handler.setLevel(logging.DEBUG)
	file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
	root_logger.addHandler(file_handler)
	# The file keeps debug output even when the console does not
	root_logger.setLevel(logging.DEBUG)


def _display_summary(title: str, message: str, style: str) -> None:
	console.print()
	console.print(Rule(Text(title, style=f"bold {style}"), style=style))
	console.print(f"\n{message}\n", markup=False)
	console.print(Rule(style=style))


def display_error_summary(error_message: str) -> None:
	"""Display an error message between red rules."""
	_display_summary("Error", error_message, "red")


def display_warning_summary(warning_message: str) -> None:
	"""Display a warning message between yellow rules."""
	_display_summary("Warning", warning_message, "yellow")
