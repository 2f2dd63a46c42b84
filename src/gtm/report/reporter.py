"""Report entry points: read notes and render them for output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from gtm.note.aggregator import retrieve_notes
from gtm.report.formatting import format_duration
from gtm.report.views import render_details, render_files, render_totals
from gtm.scm.git import GitBackend

if TYPE_CHECKING:
	from collections.abc import Sequence

	from gtm.note.models import CommitNote
	from gtm.scm.base import ScmBackend


def is_interactive(console: Console | None = None) -> bool:
	"""Return whether report output goes to a terminal."""
	return (console or Console()).is_terminal


def note_files(note: CommitNote) -> str:
	"""Render the files of a single commit note."""
	return render_files(note)


def note_files_total(note: CommitNote) -> str:
	"""Return the formatted total time of a commit note."""
	return format_duration(note.total)


def note_details(
	commit_ids: Sequence[str],
	backend: ScmBackend | None = None,
	interactive: bool | None = None,
) -> str:
	"""
	Render the detail view for the given commits.

	Args:
	    commit_ids: Commits to report, in output order
	    backend: Note store accessor, a git backend on the current directory by default
	    interactive: Whether to emphasize headers, probed from stdout when omitted

	Returns:
	    The rendered report

	"""
	if interactive is None:
		interactive = is_interactive()
	notes = retrieve_notes(commit_ids, backend or GitBackend())
	return render_details(notes, interactive=interactive)


def note_details_total(
	commit_ids: Sequence[str],
	backend: ScmBackend | None = None,
	interactive: bool | None = None,
) -> str:
	"""
	Render the totals view for the given commits.

	Args:
	    commit_ids: Commits to report, in output order
	    backend: Note store accessor, a git backend on the current directory by default
	    interactive: Whether to emphasize headers, probed from stdout when omitted

	Returns:
	    The rendered report

	"""
	if interactive is None:
		interactive = is_interactive()
	notes = retrieve_notes(commit_ids, backend or GitBackend())
	return render_totals(notes, interactive=interactive)
