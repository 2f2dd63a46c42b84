"""Commit notes: models, parsing and retrieval."""

from gtm.note.aggregator import retrieve_notes
from gtm.note.models import CommitNote, FileRecord, FileStatus
from gtm.note.parser import parse_line, parse_note

__all__ = [
	"CommitNote",
	"FileRecord",
	"FileStatus",
	"parse_line",
	"parse_note",
	"retrieve_notes",
]
