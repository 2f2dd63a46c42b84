"""Command for reporting time recorded in commit notes."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("details", "totals", "files")

# --- Command Argument Annotations ---

CommitsArg = Annotated[
	list[str] | None,
	typer.Argument(help="Commits to report, the most recent commits when omitted"),
]

TotalsFlag = Annotated[bool, typer.Option("--totals", "-t", help="Show one total line per commit")]

FilesFlag = Annotated[bool, typer.Option("--files", "-f", help="Show only the file lines of each commit")]

LimitOpt = Annotated[
	int | None,
	typer.Option("--limit", "-n", min=1, help="Number of recent commits to report when none are named"),
]


def register_command(app: typer.Typer) -> None:
	"""Register the report command with the CLI app."""

	@app.command(name="report")
	def report_command(
		commits: CommitsArg = None,
		totals: TotalsFlag = False,
		files: FilesFlag = False,
		limit: LimitOpt = None,
	) -> None:
		"""Report the time spent on files for one or more commits."""
		_report_command_impl(commits=commits, totals=totals, files=files, limit=limit)


def _resolve_format(totals: bool, files: bool, default: str) -> str:
	if totals and files:
		msg = "Choose either --totals or --files, not both"
		raise typer.BadParameter(msg)
	if totals:
		return "totals"
	if files:
		return "files"
	return default


def _report_command_impl(
	commits: list[str] | None,
	totals: bool,
	files: bool,
	limit: int | None,
) -> None:
	"""Actual implementation of the report command."""
	from gtm.errors import GTMError
	from gtm.ledger.locator import RepositoryLocator
	from gtm.note.aggregator import retrieve_notes
	from gtm.report.reporter import is_interactive, note_details, note_details_total, note_files
	from gtm.scm.git import GitBackend
	from gtm.utils.cli_utils import exit_with_error, handle_keyboard_interrupt
	from gtm.utils.config_loader import ConfigLoader

	try:
		backend = GitBackend()
		_, gtm_path = RepositoryLocator(backend).paths()
		config = ConfigLoader(gtm_path)

		report_format = _resolve_format(totals, files, config.get("report.format", "details"))
		if report_format not in REPORT_FORMATS:
			exit_with_error(f"Unknown report format '{report_format}', expected one of: {', '.join(REPORT_FORMATS)}")

		report_limit = limit or config.get("report.limit", 1)
		if isinstance(report_limit, bool) or not isinstance(report_limit, int) or report_limit < 1:
			exit_with_error(f"Invalid report limit {report_limit!r}, expected a positive integer")

		commit_ids = commits or backend.commit_ids(report_limit)
		logger.debug("Reporting %d commits as %s", len(commit_ids), report_format)

		# Probed once so the whole report is rendered the same way
		interactive = is_interactive()
		if report_format == "totals":
			output = note_details_total(commit_ids, backend, interactive=interactive)
		elif report_format == "files":
			output = "".join(note_files(note) for note in retrieve_notes(commit_ids, backend))
		else:
			output = note_details(commit_ids, backend, interactive=interactive)

		typer.echo(output, nl=False)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except GTMError as e:
		exit_with_error(str(e), exception=e)
