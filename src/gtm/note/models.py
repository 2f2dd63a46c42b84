"""Data models for parsed commit notes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FileStatus(str, Enum):
	"""Change-type tag recorded for a file in a note."""

	ADDED = "A"
	MODIFIED = "M"
	DELETED = "D"
	RENAMED = "R"


@dataclass(frozen=True)
class FileRecord:
	"""Time spent on one file within a commit."""

	source_file: str
	"""Repository-relative path."""

	status: FileStatus
	"""Change-type tag."""

	time_spent: int
	"""Elapsed seconds, never negative."""


@dataclass(frozen=True)
class CommitNote:
	"""
	A commit's metadata together with the file records from its note.

	The total is always derived from the files and is never stored.

	"""

	hash: str
	author: str
	date: str
	subject: str
	files: tuple[FileRecord, ...] = field(default_factory=tuple)

	@property
	def total(self) -> int:
		"""Sum of the time spent on every file, in seconds."""
		return sum(f.time_spent for f in self.files)
