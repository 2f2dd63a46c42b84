"""Git command helpers for gtm."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from gtm.errors import GTMError

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)

# git config exits with 1 when the requested key is not set
CONFIG_KEY_MISSING = 1


class GitError(GTMError):
	"""Custom exception for Git-related errors."""


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""
	Run a Git command and return its output.

	Args:
	    command: Git command to run
	    cwd: Working directory (optional)

	Returns:
	    Command output as string

	Raises:
	    GitError: If the command fails or git is not installed

	"""
	try:
		# The argument list is never passed through a shell
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	except FileNotFoundError as e:
		msg = "The git executable could not be found"
		raise GitError(msg) from e
	else:
		return result.stdout


def get_config_values(key: str, cwd: Path | None = None) -> list[str]:
	"""
	Return every value set for a key in the repository's local config.

	An unset key yields an empty list rather than an error.

	"""
	command = ["git", "config", "--local", "--get-all", key]
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=False,
		)
	except FileNotFoundError as e:
		msg = "The git executable could not be found"
		raise GitError(msg) from e

	if result.returncode == CONFIG_KEY_MISSING:
		return []
	if result.returncode != 0:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {result.stderr}"
		raise GitError(error_msg)
	return result.stdout.splitlines()
