"""Time reports rendered from commit notes."""

from gtm.report.formatting import emphasize, format_duration
from gtm.report.reporter import is_interactive, note_details, note_details_total, note_files, note_files_total
from gtm.report.views import render_details, render_files, render_totals

__all__ = [
	"emphasize",
	"format_duration",
	"is_interactive",
	"note_details",
	"note_details_total",
	"note_files",
	"note_files_total",
	"render_details",
	"render_files",
	"render_totals",
]
