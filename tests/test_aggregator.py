"""Tests for retrieving notes from the backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gtm.note.aggregator import retrieve_notes
from gtm.utils.git_utils import GitError

if TYPE_CHECKING:
	from tests.fakes import InMemoryBackend


@pytest.mark.unit
class TestRetrieveNotes:
	"""Test cases for retrieve_notes."""

	def test_commit_with_and_without_note(self, fake_backend: InMemoryBackend) -> None:
		"""A commit without a note yields an empty commit note, in input order."""
		fake_backend.add_commit("aaa", "First", "M file1.ext 120\nM file2.ext 60")
		fake_backend.add_commit("bbb", "Second")

		notes = retrieve_notes(["aaa", "bbb"], fake_backend)

		assert [n.hash for n in notes] == ["aaa", "bbb"]
		assert notes[0].total == 180
		assert len(notes[0].files) == 2
		assert notes[1].total == 0
		assert notes[1].files == ()

	def test_order_is_preserved_not_sorted(self, fake_backend: InMemoryBackend) -> None:
		"""Notes come back in exactly the requested order."""
		for commit_hash in ("c1", "c2", "c3"):
			fake_backend.add_commit(commit_hash, commit_hash.upper())

		notes = retrieve_notes(["c3", "c1", "c2"], fake_backend)

		assert [n.hash for n in notes] == ["c3", "c1", "c2"]

	def test_duplicates_are_kept(self, fake_backend: InMemoryBackend) -> None:
		"""Repeated identifiers produce repeated notes."""
		fake_backend.add_commit("aaa", "First", "M a.py 5")

		notes = retrieve_notes(["aaa", "aaa"], fake_backend)

		assert len(notes) == 2
		assert notes[0] == notes[1]

	def test_metadata_is_copied(self, fake_backend: InMemoryBackend) -> None:
		"""Hash, author, date and subject come from the commit metadata."""
		info = fake_backend.add_commit("aaa", "Fix parser", "M a.py 5")

		(note,) = retrieve_notes(["aaa"], fake_backend)

		assert (note.hash, note.author, note.date, note.subject) == (info.hash, info.author, info.date, info.subject)

	def test_unknown_commit_raises(self, fake_backend: InMemoryBackend) -> None:
		"""Errors from the backend propagate."""
		with pytest.raises(GitError):
			retrieve_notes(["missing"], fake_backend)
