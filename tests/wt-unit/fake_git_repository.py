"""FakeGitRepository: test double for GitRepository.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

import os
import shutil

from wtree.errors import ToolError


class FakeGitRepository:
    """Test double for GitRepository that tracks worktrees and branches in memory.

    Worktree directories are created and removed on disk so callers that check
    the filesystem see the same state git would leave behind.

    Usage:
        fake = FakeGitRepository(working_tree_dir=str(tmp_path / "project"))
        fake.add_worktree(str(tmp_path / "project.wt" / "feature"), "feature")
        assert "feature" in fake.branches
    """

    def __init__(self, working_tree_dir="/fake/repo", primary_branch="main"):
        self._working_tree_dir = working_tree_dir
        self.common_dir = os.path.join(working_tree_dir, ".git")
        self._worktrees = {working_tree_dir: primary_branch}
        self.branches = {primary_branch}
        self._failures = {}
        self._leave_directories = False
        self.calls = []

    @property
    def working_tree_dir(self):
        return self._working_tree_dir

    @property
    def worktrees(self):
        return dict(self._worktrees)

    @property
    def mutating_calls(self):
        return [call for call in self.calls if not call[0].startswith("list_")]

    def fail_on(self, operation, message):
        """Make *operation* raise ToolError(*message*) from now on."""
        self._failures[operation] = message

    def leave_directories_behind(self):
        """Simulate git leaving ignored files behind after `worktree remove`."""
        self._leave_directories = True

    def checkout_in_worktree(self, path, branch_name):
        self._worktrees[path] = branch_name
        self.branches.add(branch_name)

    def list_worktrees(self):
        self.calls.append(("list_worktrees",))
        return "\n".join(
            f"{path}  abc1234 [{branch}]" for path, branch in self._worktrees.items()
        )

    def list_worktrees_porcelain(self):
        self.calls.append(("list_worktrees_porcelain",))
        records = []
        for path, branch in self._worktrees.items():
            records.append(f"worktree {path}\nHEAD abc1234\nbranch refs/heads/{branch}\n")
        return "\n".join(records)

    def add_worktree(self, path, branch_name):
        self.calls.append(("add_worktree", path, branch_name))
        self._maybe_fail("add_worktree")
        if branch_name in self.branches:
            raise ToolError(f"fatal: a branch named '{branch_name}' already exists")
        os.makedirs(path)
        self._worktrees[path] = branch_name
        self.branches.add(branch_name)

    def remove_worktree(self, path):
        self.calls.append(("remove_worktree", path))
        self._maybe_fail("remove_worktree")
        if path not in self._worktrees:
            raise ToolError(f"fatal: '{path}' is not a working tree")
        del self._worktrees[path]
        if self._leave_directories:
            return
        shutil.rmtree(path, ignore_errors=True)

    def delete_branch(self, branch_name):
        self.calls.append(("delete_branch", branch_name))
        self._maybe_fail("delete_branch")
        if branch_name not in self.branches:
            raise ToolError(f"error: branch '{branch_name}' not found.")
        self.branches.discard(branch_name)

    def _maybe_fail(self, operation):
        if operation in self._failures:
            raise ToolError(self._failures[operation])
