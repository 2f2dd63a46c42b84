"""Ledger constants and default settings for gtm."""

# Notes namespace holding the serialized time data
NOTE_NAMESPACE = "gtm-data"
NOTES_REF = f"refs/notes/{NOTE_NAMESPACE}"

# Ledger directory at the repository root and the files kept inside it
GTM_DIRECTORY = ".gtm"
LOG_FILE_NAME = "gtm.log"
CONFIG_FILE_NAME = "config.yml"

# Hook name -> command installed into the repository hooks
GIT_HOOKS = {
	"pre-push": f"git push --no-verify origin {NOTES_REF}",
	"post-commit": "gtm commit --dry-run=false",
}

# Config key -> value keeping the notes ref fetched and carried across rewrites
GIT_CONFIG = {
	"remote.origin.fetch": f"+{NOTES_REF}:{NOTES_REF}",
	"notes.rewriteref": NOTES_REF,
}

GIT_IGNORE = f"{GTM_DIRECTORY}/"

DEFAULT_CONFIG = {
	# Report command configuration
	"report": {
		# Number of commits reported when none are named
		"limit": 1,
		# View rendered by default: 'details', 'totals' or 'files'
		"format": "details",
	},
	# Logging configuration
	"log": {
		# Whether to enable debug output
		"verbose": False,
	},
}
