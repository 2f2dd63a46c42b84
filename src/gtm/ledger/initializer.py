"""Provision a repository so that gtm notes are created and synchronized."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gtm.config import GIT_CONFIG, GIT_HOOKS, GIT_IGNORE, GTM_DIRECTORY
from gtm.errors import LedgerIOError, RepoNotFoundError
from gtm.utils.git_utils import GitError

if TYPE_CHECKING:
	from collections.abc import Iterable, Mapping

	from gtm.scm.base import ScmBackend

logger = logging.getLogger(__name__)

INIT_TITLE = "Git Time Metric has been initialized"


@dataclass(frozen=True)
class InitResult:
	"""Outcome of a ledger initialization."""

	message: str
	"""Confirmation text listing what was installed."""

	gtm_path: Path
	"""The ledger directory."""

	merged_hooks: tuple[str, ...] = ()
	"""Hooks whose existing content was kept and extended."""


def format_init_message(
	hooks: Mapping[str, str],
	settings: Mapping[str, str],
	ignore: str,
	merged_hooks: Iterable[str] = (),
) -> str:
	"""
	Build the confirmation message shown after initialization.

	Hooks and config keys are listed in sorted order.

	"""
	lines = ["", INIT_TITLE, "-" * len(INIT_TITLE)]
	lines.extend(f'{hook}: "{command}"' for hook, command in sorted(hooks.items()))
	lines.extend(f'{key}: "{value}"' for key, value in sorted(settings.items()))
	lines.append(f'gitignore: "{ignore}"')
	lines.extend(
		f"warning: {hook} hook already had content, the gtm command was appended" for hook in sorted(merged_hooks)
	)
	return "\n".join(lines) + "\n"


class LedgerInitializer:
	"""Installs the gtm ledger, hooks, notes config and ignore rule."""

	def __init__(
		self,
		backend: ScmBackend,
		cwd: Path | None = None,
		hooks: Mapping[str, str] = GIT_HOOKS,
		settings: Mapping[str, str] = GIT_CONFIG,
		ignore: str = GIT_IGNORE,
	) -> None:
		"""
		Initialize the ledger initializer.

		Args:
		    backend: Note store accessor
		    cwd: Directory to initialize from, the current directory when omitted
		    hooks: Hook name to command mapping to install
		    settings: Config key to value mapping to apply
		    ignore: Ignore pattern for the ledger directory

		"""
		self.backend = backend
		self.cwd = cwd
		self.hooks = hooks
		self.settings = settings
		self.ignore = ignore

	def initialize(self) -> InitResult:
		"""
		Provision the ledger. Safe to run repeatedly.

		Steps run in order and stop at the first failure; earlier steps are
		not rolled back.

		Returns:
		    The initialization result with its confirmation message

		Raises:
		    RepoNotFoundError: If the working directory is not inside a repository
		    LedgerIOError: If creating the ledger or writing hooks/config fails

		"""
		cwd = self.cwd or Path.cwd()
		try:
			root_path = self.backend.root_path(cwd)
		except GitError as e:
			msg = f"Unable to initialize Git Time Metric, Git repository not found in {cwd}"
			raise RepoNotFoundError(msg) from e

		gtm_path = root_path / GTM_DIRECTORY
		try:
			gtm_path.mkdir(mode=0o700, parents=True, exist_ok=True)
			merged_hooks = self.backend.init_hooks(self.hooks)
			self.backend.config(self.settings)
			self.backend.ignore(self.ignore)
		except (OSError, GitError) as e:
			msg = f"Unable to initialize Git Time Metric: {e}"
			raise LedgerIOError(msg) from e

		logger.info("Initialized ledger at %s", gtm_path)
		message = format_init_message(self.hooks, self.settings, self.ignore, merged_hooks)
		return InitResult(message=message, gtm_path=gtm_path, merged_hooks=tuple(merged_hooks))
