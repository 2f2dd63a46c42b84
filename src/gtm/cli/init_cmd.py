"""Command for initializing the gtm ledger in a repository."""

from __future__ import annotations

import logging

import typer

logger = logging.getLogger(__name__)


def register_command(app: typer.Typer) -> None:
	"""Register the init command with the CLI app."""

	@app.command(name="init")
	def init_command() -> None:
		"""
		Initialize Git Time Metric for the current repository.

		Creates the ledger directory, installs the git hooks, configures
		notes synchronization and ignores the ledger directory. Running it
		again is safe.

		"""
		_init_command_impl()


def _init_command_impl() -> None:
	"""Actual implementation of the init command."""
	from gtm.errors import GTMError
	from gtm.ledger.initializer import LedgerInitializer
	from gtm.scm.git import GitBackend
	from gtm.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning

	try:
		result = LedgerInitializer(GitBackend()).initialize()
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except GTMError as e:
		exit_with_error(str(e), exception=e)
	else:
		typer.echo(result.message, nl=False)
		if result.merged_hooks:
			show_warning(
				"Existing hooks were kept and the gtm command was appended to: " + ", ".join(result.merged_hooks)
			)
