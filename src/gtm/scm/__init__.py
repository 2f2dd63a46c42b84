"""Version-control access for gtm."""

from gtm.scm.base import CommitInfo, ScmBackend
from gtm.scm.git import GitBackend
from gtm.utils.git_utils import GitError

__all__ = [
	"CommitInfo",
	"GitBackend",
	"GitError",
	"ScmBackend",
]
