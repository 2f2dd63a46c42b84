"""Resolve the repository root and the ledger directory inside it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gtm.config import GTM_DIRECTORY
from gtm.errors import NotInitializedError
from gtm.utils.git_utils import GitError

if TYPE_CHECKING:
	from pathlib import Path

	from gtm.scm.base import ScmBackend

logger = logging.getLogger(__name__)


class RepositoryLocator:
	"""Locates the repository root and the gtm ledger directory."""

	def __init__(self, backend: ScmBackend) -> None:
		"""
		Initialize the locator.

		Args:
		    backend: Note store accessor used for root discovery

		"""
		self.backend = backend

	def paths(self, path: Path | None = None) -> tuple[Path, Path]:
		"""
		Return the repository root and the ledger path within it.

		Args:
		    path: Directory to resolve from, the current directory when omitted

		Returns:
		    Tuple of (root path, ledger path)

		Raises:
		    NotInitializedError: If there is no repository or no ledger directory

		"""
		try:
			root_path = self.backend.root_path(path)
		except GitError as e:
			logger.debug("No repository root found from %s: %s", path, e)
			raise NotInitializedError from e

		gtm_path = root_path / GTM_DIRECTORY
		if not gtm_path.is_dir():
			raise NotInitializedError
		return root_path, gtm_path
