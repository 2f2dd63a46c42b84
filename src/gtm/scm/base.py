"""Capability interface over the version-control plumbing used by gtm."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gtm.config import NOTES_REF

if TYPE_CHECKING:
	from collections.abc import Mapping
	from pathlib import Path


@dataclass(frozen=True)
class CommitInfo:
	"""Metadata of a single commit as shown in reports."""

	hash: str
	"""Full commit identifier."""

	author: str
	"""Author name."""

	date: str
	"""Author date, already formatted for display."""

	subject: str
	"""First line of the commit message."""


class ScmBackend(abc.ABC):
	"""
	Abstract base class for the note store accessor.

	Implementations give the ledger and report code access to:
	- repository root discovery
	- hook, config and ignore-rule installation
	- note text and commit metadata per commit

	"""

	@abc.abstractmethod
	def root_path(self, path: Path | None = None) -> Path:
		"""
		Return the working tree root of the repository containing ``path``.

		Args:
		    path: Directory to start from, the backend's default when omitted

		Raises:
		    GitError: If no repository is found

		"""

	@abc.abstractmethod
	def init_hooks(self, hooks: Mapping[str, str]) -> list[str]:
		"""
		Register each hook command so it runs on the matching repository event.

		Args:
		    hooks: Mapping of hook name to shell command

		Returns:
		    Names of hooks that already had other content, which was kept

		"""

	@abc.abstractmethod
	def config(self, settings: Mapping[str, str]) -> None:
		"""
		Apply config key/value pairs without duplicating existing entries.

		Args:
		    settings: Mapping of config key to value

		"""

	@abc.abstractmethod
	def ignore(self, pattern: str) -> None:
		"""Make sure ``pattern`` is listed in the repository's ignore file."""

	@abc.abstractmethod
	def read_note(self, commit_id: str, ref: str = NOTES_REF) -> tuple[CommitInfo, str]:
		"""
		Read a commit's metadata and the raw note attached to it.

		Args:
		    commit_id: Revision naming the commit
		    ref: Notes ref to read from

		Returns:
		    Tuple of commit metadata and note text, empty when no note exists

		Raises:
		    GitError: If the revision does not name a commit

		"""

	@abc.abstractmethod
	def commit_ids(self, limit: int, start: str = "HEAD") -> list[str]:
		"""Return up to ``limit`` commit hashes reachable from ``start``, newest first."""
