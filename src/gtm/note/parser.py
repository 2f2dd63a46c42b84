"""
Parser for raw note text.

Each line of a note describes one file as ``<status> <path> <seconds>``.
The status is the first token and the seconds the last one, so paths may
contain spaces. Lines that do not fit are skipped.

"""

from __future__ import annotations

import logging

from gtm.note.models import FileRecord, FileStatus

logger = logging.getLogger(__name__)


def parse_line(line: str) -> FileRecord | None:
	"""
	Parse a single note line.

	Args:
	    line: One line of raw note text

	Returns:
	    The file record, or None when the line is blank or malformed

	"""
	parts = line.strip().split(maxsplit=1)
	if len(parts) < 2:  # noqa: PLR2004
		return None
	tag, rest = parts

	rest_parts = rest.rsplit(maxsplit=1)
	if len(rest_parts) < 2:  # noqa: PLR2004
		return None
	path, seconds = rest_parts

	try:
		status = FileStatus(tag.upper())
	except ValueError:
		return None

	if not (seconds.isascii() and seconds.isdigit()):
		return None

	return FileRecord(source_file=path.strip(), status=status, time_spent=int(seconds))


def parse_note(text: str) -> tuple[FileRecord, ...]:
	"""
	Parse raw note text into file records.

	Malformed lines are skipped. A path listed more than once is merged into a
	single record at its first position, with times summed and the last
	status kept.

	Args:
	    text: Raw note text, possibly empty

	Returns:
	    File records in note order

	"""
	records: dict[str, FileRecord] = {}
	for number, line in enumerate(text.splitlines(), start=1):
		if not line.strip():
			continue
		record = parse_line(line)
		if record is None:
			logger.debug("Skipping malformed note line %d: %r", number, line)
			continue

		previous = records.get(record.source_file)
		if previous is not None:
			record = FileRecord(
				source_file=record.source_file,
				status=record.status,
				time_spent=previous.time_spent + record.time_spent,
			)
		records[record.source_file] = record
	return tuple(records.values())
