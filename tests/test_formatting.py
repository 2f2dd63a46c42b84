"""Tests for duration and line formatting."""

from __future__ import annotations

import pytest

from gtm.errors import RenderError
from gtm.note.models import FileRecord, FileStatus
from gtm.report.formatting import BOLD, RESET, emphasize, file_line, format_duration


@pytest.mark.unit
class TestFormatDuration:
	"""Test cases for format_duration."""

	@pytest.mark.parametrize(
		("seconds", "expected"),
		[
			(0, "0s"),
			(1, "1s"),
			(59, "59s"),
			(60, "1m 0s"),
			(120, "2m 0s"),
			(180, "3m 0s"),
			(3599, "59m 59s"),
			(3600, "1h 0m 0s"),
			(3661, "1h 1m 1s"),
			(90061, "25h 1m 1s"),
		],
	)
	def test_formats(self, seconds: int, expected: str) -> None:
		"""Durations drop leading zero units only."""
		assert format_duration(seconds) == expected

	def test_zero_is_never_empty(self) -> None:
		"""Zero renders as an explicit token."""
		assert format_duration(0)

	@pytest.mark.parametrize("value", [-1, 1.5, "60", None, True])
	def test_invalid_input_raises(self, value: object) -> None:
		"""Only non-negative integers can be formatted."""
		with pytest.raises(RenderError):
			format_duration(value)  # type: ignore[arg-type]

	def test_stateless(self) -> None:
		"""Formatting the same value twice gives the same text."""
		assert format_duration(4000) == format_duration(4000)


@pytest.mark.unit
def test_emphasize() -> None:
	"""Bold markers are only added for interactive output."""
	assert emphasize("abc", interactive=True) == f"{BOLD}abc{RESET}"
	assert emphasize("abc", interactive=False) == "abc"


@pytest.mark.unit
def test_file_line_layout() -> None:
	"""File lines right-align the duration in 14 columns."""
	line = file_line(FileRecord("src/app.py", FileStatus.ADDED, 3661))
	assert line == "      1h 1m 1s  [A] src/app.py"
