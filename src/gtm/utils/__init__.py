"""Utility module for gtm."""

from .git_utils import GitError, get_config_values, run_git_command

__all__ = [
	"GitError",
	"get_config_values",
	"run_git_command",
]
