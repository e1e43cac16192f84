"""GitRepository: wraps GitPython Repo for the worktree and branch operations wt needs.

Provides an injectable interface for Git operations, enabling
FakeGitRepository in tests without unittest.mock.patch.
"""

import os
import subprocess

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from wtree.errors import PreconditionError, ToolError


class GitRepository:
    """Wraps a GitPython Repo with the worktree operations used by wt.

    Repository discovery goes through GitPython. Worktree and branch commands
    run git directly so its stderr can be surfaced unmodified when they fail.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def discover(cls, path=None):
        """Open the repository containing *path* (defaults to the cwd).

        Raises:
            PreconditionError: If *path* is not inside a git checkout.
        """
        path = path or os.getcwd()
        try:
            repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise PreconditionError(f"{path} is not inside a git repository")
        if repo.bare:
            raise PreconditionError(f"{repo.git_dir} is a bare repository")
        return cls(repo)

    @property
    def working_tree_dir(self):
        return self._repo.working_tree_dir

    @property
    def common_dir(self):
        """Absolute path of the metadata directory shared by every worktree."""
        return os.path.abspath(self._repo.common_dir)

    def list_worktrees(self):
        """Return `git worktree list` output exactly as git prints it."""
        return self._run_git("worktree", "list").rstrip("\n")

    def list_worktrees_porcelain(self):
        return self._run_git("worktree", "list", "--porcelain")

    def add_worktree(self, path, branch_name):
        """Create a worktree at *path* on a new branch *branch_name*."""
        self._run_git("worktree", "add", "-b", branch_name, path)

    def remove_worktree(self, path):
        self._run_git("worktree", "remove", path)

    def delete_branch(self, branch_name):
        """Delete *branch_name*; git refuses if the branch is not fully merged."""
        self._run_git("branch", "-d", branch_name)

    def _run_git(self, *args):
        result = subprocess.run(
            ["git", *args],
            cwd=self._repo.working_tree_dir,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            message = result.stderr.strip() or result.stdout.strip()
            raise ToolError(message or f"git {args[0]} failed with exit code {result.returncode}")
        return result.stdout
