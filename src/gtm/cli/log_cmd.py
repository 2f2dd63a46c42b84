"""Command for writing a diagnostic line to the ledger log."""

from __future__ import annotations

from typing import Annotated

import typer

ValuesArg = Annotated[list[str], typer.Argument(help="Values to write to the ledger log")]


def register_command(app: typer.Typer) -> None:
	"""Register the log command with the CLI app."""

	@app.command(name="log")
	def log_command(values: ValuesArg) -> None:
		"""Append a line to the ledger log file."""
		from gtm.errors import GTMError
		from gtm.ledger.locator import RepositoryLocator
		from gtm.ledger.log import LedgerLog
		from gtm.scm.git import GitBackend
		from gtm.utils.cli_utils import exit_with_error

		try:
			LedgerLog(RepositoryLocator(GitBackend())).log(*values)
		except GTMError as e:
			exit_with_error(str(e), exception=e)
