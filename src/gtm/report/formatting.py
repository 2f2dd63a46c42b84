"""Duration and line formatting shared by the report views."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtm.errors import RenderError

if TYPE_CHECKING:
	from gtm.note.models import FileRecord

BOLD = "\x1b[1m"
RESET = "\x1b[0m"
DURATION_WIDTH = 14

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


def format_duration(seconds: int) -> str:
	"""
	Format a number of seconds as a compact duration.

	Leading zero units are dropped, inner ones are kept, and zero is
	rendered as ``0s``.

	Examples:
	    >>> format_duration(3661)
	    '1h 1m 1s'
	    >>> format_duration(120)
	    '2m 0s'

	Raises:
	    RenderError: If ``seconds`` is not a non-negative integer

	"""
	if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 0:
		msg = f"Cannot format duration {seconds!r}"
		raise RenderError(msg)

	hours, remainder = divmod(seconds, SECONDS_PER_HOUR)
	minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)
	if hours:
		return f"{hours}h {minutes}m {secs}s"
	if minutes:
		return f"{minutes}m {secs}s"
	return f"{secs}s"


def emphasize(text: str, interactive: bool) -> str:
	"""Wrap ``text`` in bold markers when writing to a terminal."""
	return f"{BOLD}{text}{RESET}" if interactive else text


def total_line(seconds: int) -> str:
	"""Return the total duration right-aligned to the duration column."""
	return f"{format_duration(seconds):>{DURATION_WIDTH}}"


def file_line(record: FileRecord) -> str:
	"""Return one file line: right-aligned duration, bracketed status and path."""
	return f"{format_duration(record.time_spent):>{DURATION_WIDTH}}  [{record.status.value}] {record.source_file}"
