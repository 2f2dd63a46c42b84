"""Global test fixtures and configuration."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pygit2
import pytest

from gtm.config import GTM_DIRECTORY
from tests.fakes import FixedClock, InMemoryBackend

if TYPE_CHECKING:
	from pathlib import Path


@pytest.fixture
def fixed_clock() -> FixedClock:
	"""Clock frozen at 2024-03-05 14:30:00 UTC."""
	return FixedClock(datetime(2024, 3, 5, 14, 30, 0, tzinfo=timezone(timedelta(0))))


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
	"""An empty directory standing in for a repository root."""
	root = tmp_path / "project"
	root.mkdir()
	return root


@pytest.fixture
def fake_backend(repo_root: Path) -> InMemoryBackend:
	"""In-memory backend rooted at ``repo_root``."""
	return InMemoryBackend(repo_root)


@pytest.fixture
def initialized_backend(fake_backend: InMemoryBackend, repo_root: Path) -> InMemoryBackend:
	"""In-memory backend whose root already has a ledger directory."""
	(repo_root / GTM_DIRECTORY).mkdir()
	return fake_backend


@pytest.fixture
def git_repo(tmp_path: Path) -> pygit2.Repository:
	"""A real git repository with no commits."""
	return pygit2.init_repository(str(tmp_path / "repo"))
