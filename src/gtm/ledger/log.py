"""Append-only diagnostic log kept inside the ledger directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtm.config import LOG_FILE_NAME
from gtm.errors import LedgerIOError
from gtm.ledger.clock import SystemClock

if TYPE_CHECKING:
	from gtm.ledger.clock import Clock
	from gtm.ledger.locator import RepositoryLocator

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class LedgerLog:
	"""Writes diagnostic lines to the ledger log file."""

	def __init__(self, locator: RepositoryLocator, clock: Clock | None = None) -> None:
		self.locator = locator
		self.clock = clock or SystemClock()

	def log(self, *values: object) -> None:
		"""
		Append one timestamped line built from ``values``.

		The file is opened for append-or-create on every call and is never
		truncated.

		Raises:
		    NotInitializedError: If the ledger directory is missing
		    LedgerIOError: If the log file cannot be written

		"""
		_, gtm_path = self.locator.paths()
		line = " ".join(str(v) for v in values)
		stamp = self.clock.now().strftime(TIMESTAMP_FORMAT)
		try:
			with (gtm_path / LOG_FILE_NAME).open("a", encoding="utf-8") as f:
				f.write(f"{stamp} {line}\n")
		except OSError as e:
			msg = f"error opening log file: {e}"
			raise LedgerIOError(msg) from e
