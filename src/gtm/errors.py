"""Exceptions raised by gtm."""


class GTMError(Exception):
	"""Base exception for gtm errors."""


class NotInitializedError(GTMError):
	"""Raised when the ledger directory is missing from the repository."""

	def __init__(self, message: str = "Git Time Metric is not initialized") -> None:
		"""Initialize with a default message."""
		super().__init__(message)


class RepoNotFoundError(GTMError):
	"""Raised when no git repository can be found from the current location."""


class LedgerIOError(GTMError):
	"""Raised when writing ledger files, hooks or config fails."""


class RenderError(GTMError):
	"""Raised when report formatting receives invalid internal input."""
