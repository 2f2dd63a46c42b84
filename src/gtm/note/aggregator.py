"""Build commit notes from the note store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gtm.config import NOTES_REF
from gtm.note.models import CommitNote
from gtm.note.parser import parse_note

if TYPE_CHECKING:
	from collections.abc import Sequence

	from gtm.scm.base import ScmBackend

logger = logging.getLogger(__name__)


def retrieve_notes(commit_ids: Sequence[str], backend: ScmBackend, ref: str = NOTES_REF) -> list[CommitNote]:
	"""
	Read and parse the notes of the given commits.

	The result matches ``commit_ids`` one to one and in the same order,
	duplicates included. A commit without a note yields a note with no files.

	Args:
	    commit_ids: Commit identifiers, in report order
	    backend: Note store accessor
	    ref: Notes ref to read from

	Returns:
	    List of parsed commit notes

	Raises:
	    GitError: If a commit identifier cannot be resolved

	"""
	notes = []
	for commit_id in commit_ids:
		info, text = backend.read_note(commit_id, ref)
		files = parse_note(text)
		logger.debug("Commit %s has %d tracked files", info.hash, len(files))
		notes.append(
			CommitNote(
				hash=info.hash,
				author=info.author,
				date=info.date,
				subject=info.subject,
				files=files,
			)
		)
	return notes
