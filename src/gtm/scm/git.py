"""Git implementation of the note store accessor using pygit2."""

from __future__ import annotations

import itertools
import logging
import stat
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import Commit, discover_repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode
from pygit2.repository import Repository

from gtm.config import NOTES_REF
from gtm.scm.base import CommitInfo, ScmBackend
from gtm.utils.git_utils import GitError, get_config_values, run_git_command

if TYPE_CHECKING:
	from collections.abc import Mapping

logger = logging.getLogger(__name__)

DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"
HOOK_SHEBANG = "#!/bin/sh"
EXECUTABLE = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class GitBackend(ScmBackend):
	"""Note store accessor backed by a local git repository."""

	def __init__(self, path: Path | None = None) -> None:
		"""
		Initialize the backend.

		Args:
		    path: Directory inside the repository, the current directory when omitted

		"""
		self.path = path

	def _repository(self, path: Path | None = None) -> Repository:
		start = path or self.path or Path.cwd()
		try:
			git_dir = discover_repository(str(start))
		except (Pygit2GitError, KeyError) as e:
			msg = f"Not a git repository: {start}"
			raise GitError(msg) from e
		if git_dir is None:
			msg = f"Not a git repository: {start}"
			raise GitError(msg)
		return Repository(git_dir)

	def root_path(self, path: Path | None = None) -> Path:
		"""Return the working tree root of the repository containing ``path``."""
		repo = self._repository(path)
		if repo.workdir is None:
			msg = f"Repository at {repo.path} has no working tree"
			raise GitError(msg)
		return Path(repo.workdir).resolve()

	def _hooks_dir(self, repo: Repository) -> Path:
		if "core.hooksPath" in repo.config:
			hooks_path = Path(repo.config["core.hooksPath"]).expanduser()
			if not hooks_path.is_absolute() and repo.workdir is not None:
				hooks_path = Path(repo.workdir) / hooks_path
			return hooks_path
		return Path(repo.path) / "hooks"

	def init_hooks(self, hooks: Mapping[str, str]) -> list[str]:
		"""
		Install hook commands, keeping any content already in the hook files.

		A hook that already runs the command is left as is. A hook with other
		content gets the command appended and is reported back as merged.

		"""
		hooks_dir = self._hooks_dir(self._repository())
		hooks_dir.mkdir(parents=True, exist_ok=True)

		merged: list[str] = []
		for name, command in hooks.items():
			hook_file = hooks_dir / name
			if hook_file.exists():
				content = hook_file.read_text(encoding="utf-8")
				if command in (line.strip() for line in content.splitlines()):
					logger.debug("Hook %s already runs %r", hook_file, command)
				else:
					logger.warning("Hook %s has existing content, appending %r", hook_file, command)
					separator = "\n" if content and not content.endswith("\n") else ""
					hook_file.write_text(f"{content}{separator}{command}\n", encoding="utf-8")
					merged.append(name)
			else:
				hook_file.write_text(f"{HOOK_SHEBANG}\n{command}\n", encoding="utf-8")
				logger.debug("Created hook %s", hook_file)
			hook_file.chmod(hook_file.stat().st_mode | EXECUTABLE)
		return merged

	def config(self, settings: Mapping[str, str]) -> None:
		"""Add each config value unless the key already holds it."""
		root = self.root_path()
		for key, value in settings.items():
			if value in get_config_values(key, cwd=root):
				logger.debug("Config %s already contains %r", key, value)
				continue
			run_git_command(["git", "config", "--local", "--add", key, value], cwd=root)

	def ignore(self, pattern: str) -> None:
		"""Append ``pattern`` to the root .gitignore unless it is already listed."""
		gitignore = self.root_path() / ".gitignore"
		content = gitignore.read_text(encoding="utf-8") if gitignore.exists() else ""
		if pattern in (line.strip() for line in content.splitlines()):
			return
		separator = "\n" if content and not content.endswith("\n") else ""
		with gitignore.open("a", encoding="utf-8") as f:
			f.write(f"{separator}{pattern}\n")

	def _commit(self, repo: Repository, commit_id: str) -> Commit:
		try:
			return repo.revparse_single(commit_id).peel(Commit)
		except (KeyError, ValueError, Pygit2GitError) as e:
			msg = f"Unknown commit: {commit_id}"
			raise GitError(msg) from e

	def read_note(self, commit_id: str, ref: str = NOTES_REF) -> tuple[CommitInfo, str]:
		"""Read a commit's metadata and its note text, empty when it has none."""
		repo = self._repository()
		commit = self._commit(repo, commit_id)

		try:
			text = repo.lookup_note(str(commit.id), ref).message
		except KeyError:
			text = ""

		author = commit.author
		when = datetime.fromtimestamp(author.time, tz=timezone(timedelta(minutes=author.offset)))
		info = CommitInfo(
			hash=str(commit.id),
			author=author.name,
			date=when.strftime(DATE_FORMAT),
			subject=commit.message.splitlines()[0].strip() if commit.message else "",
		)
		return info, text

	def commit_ids(self, limit: int, start: str = "HEAD") -> list[str]:
		"""Return up to ``limit`` commit hashes reachable from ``start``, newest first."""
		repo = self._repository()
		head = self._commit(repo, start)
		walker = repo.walk(head.id, SortMode.TOPOLOGICAL | SortMode.TIME)
		return [str(commit.id) for commit in itertools.islice(walker, max(limit, 0))]
