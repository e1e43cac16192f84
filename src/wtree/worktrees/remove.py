"""Remove a worktree and delete its branch after confirmation."""

import contextlib
import os

import click

from wtree.errors import NotFoundError
from wtree.prompt import confirm
from wtree.worktrees.listing import list_worktrees


def remove_worktree(wctx, branch_name):
    """Remove ``<project>.wt/<branch_name>`` and delete the branch.

    The branch is deleted with ``git branch -d``; if git refuses (unmerged
    work) the worktree stays removed and the error propagates.

    Returns:
        True if the worktree was removed, False if the user cancelled.

    Raises:
        NotFoundError: If the worktree directory does not exist. Nothing is prompted.
        ToolError: If git fails.
    """
    worktree_path = wctx.layout.worktree_path(branch_name)

    list_worktrees(wctx)
    click.echo()

    if not os.path.isdir(worktree_path):
        raise NotFoundError(f"Worktree not found at {worktree_path}")

    if not confirm(f"Remove worktree: {worktree_path}?", config=wctx.confirm_config):
        click.echo("Cancelled")
        return False

    click.echo("Removing worktree...")
    wctx.git_repo.remove_worktree(worktree_path)

    # git leaves the directory behind when it still holds ignored files
    with contextlib.suppress(OSError):
        os.rmdir(worktree_path)

    click.echo("✓ Worktree removed successfully")

    wctx.git_repo.delete_branch(branch_name)
    click.echo(f"✓ Branch {branch_name} deleted")
    return True
