"""
Text views over commit notes.

Every view is a pure function of its notes and the interactive flag, so the
same input always renders the same text.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gtm.report.formatting import emphasize, file_line, format_duration, total_line

if TYPE_CHECKING:
	from collections.abc import Iterable, Sequence

	from gtm.note.models import CommitNote


def _join(lines: Iterable[str]) -> str:
	return "".join(f"{line}\n" for line in lines)


def _header(note: CommitNote, interactive: bool) -> str:
	return f"{emphasize(note.hash, interactive)} {emphasize(note.subject, interactive)}"


def render_details(notes: Sequence[CommitNote], *, interactive: bool) -> str:
	"""
	Render each commit with its files and total.

	A commit without files shows only its header and date/author lines.

	"""
	lines: list[str] = []
	for note in notes:
		lines.append(_header(note, interactive))
		lines.append(f"{note.date} {note.author}")
		if note.files:
			lines.extend(file_line(f) for f in note.files)
			lines.append(total_line(note.total))
			lines.append("")
	return _join(lines)


def render_files(note: CommitNote) -> str:
	"""Render one commit's file lines followed by its total, if it has files."""
	lines = [file_line(f) for f in note.files]
	if note.files:
		lines.append(total_line(note.total))
	return _join(lines)


def render_totals(notes: Sequence[CommitNote], *, interactive: bool) -> str:
	"""Render one line per commit ending in its total time, when it has files."""
	lines = []
	for note in notes:
		line = f"{_header(note, interactive)} {note.date} {note.author}"
		if note.files:
			line = f"{line}  {format_duration(note.total)}"
		lines.append(line)
	return _join(lines)
