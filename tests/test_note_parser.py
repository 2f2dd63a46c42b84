"""Tests for parsing raw note text."""

from __future__ import annotations

import pytest

from gtm.note.models import CommitNote, FileRecord, FileStatus
from gtm.note.parser import parse_line, parse_note


@pytest.mark.unit
class TestParseLine:
	"""Test cases for single note lines."""

	def test_parses_status_path_and_seconds(self) -> None:
		"""A well-formed line becomes a file record."""
		assert parse_line("M src/app.py 120") == FileRecord("src/app.py", FileStatus.MODIFIED, 120)

	def test_path_keeps_interior_spaces(self) -> None:
		"""Everything between the status and the seconds is the path."""
		record = parse_line("A docs/release notes.md 30")
		assert record is not None
		assert record.source_file == "docs/release notes.md"

	def test_status_is_case_insensitive(self) -> None:
		"""Lower-case tags are accepted."""
		record = parse_line("r old.txt 5")
		assert record is not None
		assert record.status is FileStatus.RENAMED

	@pytest.mark.parametrize(
		"line",
		[
			"",
			"   ",
			"M file.txt",
			"M 120",
			"X file.txt 10",
			"M file.txt ten",
			"M file.txt -5",
			"M file.txt 1.5",
			"total:300",
		],
	)
	def test_malformed_lines_are_rejected(self, line: str) -> None:
		"""Lines missing a field or carrying foreign content yield None."""
		assert parse_line(line) is None


@pytest.mark.unit
class TestParseNote:
	"""Test cases for whole notes."""

	def test_parses_lines_in_order(self) -> None:
		"""Records follow the order of the note lines."""
		records = parse_note("M file1.ext 120\nA file2.ext 60\n")
		assert [r.source_file for r in records] == ["file1.ext", "file2.ext"]
		assert [r.time_spent for r in records] == [120, 60]

	def test_malformed_lines_do_not_stop_parsing(self) -> None:
		"""Bad lines are skipped and the rest of the note is still read."""
		records = parse_note("M file1.ext 120\nM broken\n\nnot a record at all\nD file2.ext 60")
		assert [r.source_file for r in records] == ["file1.ext", "file2.ext"]

	def test_empty_note(self) -> None:
		"""An empty note has no records."""
		assert parse_note("") == ()

	def test_duplicate_paths_are_merged(self) -> None:
		"""A repeated path keeps its first position, sums time and keeps the last status."""
		records = parse_note("M a.py 10\nA b.py 5\nD a.py 20")
		assert records == (
			FileRecord("a.py", FileStatus.DELETED, 30),
			FileRecord("b.py", FileStatus.ADDED, 5),
		)


@pytest.mark.unit
class TestCommitNoteTotal:
	"""Test cases for the derived total."""

	def test_total_is_sum_of_files(self) -> None:
		"""The total always equals the sum of the file times."""
		note = CommitNote("abc", "Jane", "today", "Subject", parse_note("M a 1000\nM b 2000\nA c 661"))
		assert note.total == sum(f.time_spent for f in note.files) == 3661

	def test_total_of_empty_note_is_zero(self) -> None:
		"""A note without files totals zero."""
		assert CommitNote("abc", "Jane", "today", "Subject").total == 0
