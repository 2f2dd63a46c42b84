"""Tests for locating the repository and its ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gtm.config import GTM_DIRECTORY
from gtm.errors import NotInitializedError
from gtm.ledger.locator import RepositoryLocator
from tests.fakes import InMemoryBackend

if TYPE_CHECKING:
	from pathlib import Path


@pytest.mark.unit
class TestRepositoryLocator:
	"""Test cases for RepositoryLocator.paths."""

	def test_returns_root_and_ledger(self, initialized_backend: InMemoryBackend, repo_root: Path) -> None:
		"""An initialized repository resolves to its root and ledger path."""
		root_path, gtm_path = RepositoryLocator(initialized_backend).paths()

		assert root_path == repo_root
		assert gtm_path == repo_root / GTM_DIRECTORY

	def test_missing_ledger(self, fake_backend: InMemoryBackend) -> None:
		"""A repository without the ledger directory is not initialized."""
		with pytest.raises(NotInitializedError):
			RepositoryLocator(fake_backend).paths()

	def test_ledger_must_be_a_directory(self, fake_backend: InMemoryBackend, repo_root: Path) -> None:
		"""A file named like the ledger does not count."""
		(repo_root / GTM_DIRECTORY).write_text("", encoding="utf-8")

		with pytest.raises(NotInitializedError):
			RepositoryLocator(fake_backend).paths()

	def test_no_repository(self) -> None:
		"""Without a repository root the result is also not initialized."""
		with pytest.raises(NotInitializedError):
			RepositoryLocator(InMemoryBackend(root=None)).paths()

	def test_repeatable(self, initialized_backend: InMemoryBackend) -> None:
		"""Calling paths twice gives the same answer."""
		locator = RepositoryLocator(initialized_backend)
		assert locator.paths() == locator.paths()
