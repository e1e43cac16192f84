"""RepoLayout value object: primary checkout, project name and worktree base directory."""

import os
from dataclasses import dataclass

from wtree.errors import PreconditionError

GIT_DIR_NAME = ".git"
WORKTREE_SUFFIX = ".wt"


@dataclass(frozen=True)
class RepoLayout:
    """Where the primary checkout lives and where its worktrees go.

    Worktrees are placed in a sibling directory of the primary checkout:
        /path/to/project -> /path/to/project.wt/<branch>
    """

    primary_root: str
    project_name: str
    worktree_base: str

    def worktree_path(self, branch_name: str) -> str:
        return os.path.join(self.worktree_base, branch_name)


def layout_for(primary_root: str) -> RepoLayout:
    primary_root = os.path.abspath(primary_root)
    project_name = os.path.basename(primary_root)
    worktree_base = os.path.join(
        os.path.dirname(primary_root), f"{project_name}{WORKTREE_SUFFIX}"
    )
    return RepoLayout(primary_root, project_name, worktree_base)


def resolve_layout(git_repo) -> RepoLayout:
    """Derive the layout from any checkout of the repository.

    The shared metadata directory (``git rev-parse --git-common-dir``) is the
    same for the primary checkout and all linked worktrees, so its parent is
    the primary checkout regardless of where wt was invoked.

    Args:
        git_repo: A GitRepository (or fake) exposing ``common_dir``.

    Raises:
        PreconditionError: If the common directory is not named ``.git``.
    """
    common_dir = os.path.normpath(git_repo.common_dir)
    if os.path.basename(common_dir) != GIT_DIR_NAME:
        raise PreconditionError(
            f"Unexpected repository layout: shared git directory is {common_dir}"
        )
    return layout_for(os.path.dirname(common_dir))
