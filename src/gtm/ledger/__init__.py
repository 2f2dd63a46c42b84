"""Ledger setup, location and logging for gtm."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtm.ledger.clock import Clock, SystemClock
from gtm.ledger.initializer import InitResult, LedgerInitializer, format_init_message
from gtm.ledger.locator import RepositoryLocator
from gtm.ledger.log import LedgerLog
from gtm.scm.git import GitBackend

if TYPE_CHECKING:
	from pathlib import Path


def paths(path: Path | None = None) -> tuple[Path, Path]:
	"""Return the repository root and ledger path for ``path`` or the current directory."""
	return RepositoryLocator(GitBackend(path)).paths(path)


def initialize(cwd: Path | None = None) -> InitResult:
	"""Initialize the ledger of the repository containing ``cwd``."""
	return LedgerInitializer(GitBackend(cwd), cwd=cwd).initialize()


def log_to_gtm(*values: object) -> None:
	"""Append a diagnostic line to the current repository's ledger log."""
	LedgerLog(RepositoryLocator(GitBackend())).log(*values)


__all__ = [
	"Clock",
	"InitResult",
	"LedgerInitializer",
	"LedgerLog",
	"RepositoryLocator",
	"SystemClock",
	"format_init_message",
	"initialize",
	"log_to_gtm",
	"paths",
]
