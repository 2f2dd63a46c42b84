"""Source of the current time for ledger writes."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
	"""Protocol for objects that report the current time."""

	def now(self) -> datetime:
		"""Return the current time."""
		...


class SystemClock:
	"""Clock reading the local system time."""

	def now(self) -> datetime:
		"""Return the current local time, timezone aware."""
		return datetime.now().astimezone()
