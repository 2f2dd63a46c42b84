"""Command-line interface package for gtm."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from gtm import __version__
from gtm.config import LOG_FILE_NAME
from gtm.utils.cli_utils import exit_with_error
from gtm.utils.config_loader import ConfigError, ConfigLoader
from gtm.utils.log_setup import setup_logging

from .init_cmd import register_command as register_init_command
from .log_cmd import register_command as register_log_command
from .report_cmd import register_command as register_report_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"Git Time Metric - time spent per file, kept in git notes\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"gtm version: {__version__}")
		raise typer.Exit


def _ledger_path() -> Path | None:
	"""Return the ledger directory of the current repository, if it is initialized."""
	from gtm.errors import NotInitializedError
	from gtm.ledger.locator import RepositoryLocator
	from gtm.scm.git import GitBackend

	try:
		_, gtm_path = RepositoryLocator(GitBackend()).paths()
	except NotInitializedError:
		return None
	return gtm_path


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option("--save-log", help="Also write logs to the ledger's gtm.log file."),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["is_output_log"] = is_output_log

	gtm_path = _ledger_path()
	if gtm_path is not None:
		try:
			is_verbose = is_verbose or bool(ConfigLoader(gtm_path).get("log.verbose", False))
		except ConfigError as e:
			exit_with_error(str(e), exception=e)

	log_file_path = gtm_path / LOG_FILE_NAME if is_output_log and gtm_path is not None else None
	setup_logging(is_verbose=is_verbose, log_file_path=log_file_path)
	if is_output_log and log_file_path is None:
		logger.warning("Repository is not initialized, logs are not saved")


# --- Register commands ---

register_init_command(app)
register_report_command(app)
register_log_command(app)


# --- Main Entry Point ---
def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
