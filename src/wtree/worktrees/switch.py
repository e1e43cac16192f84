"""Resolve a worktree by branch name and hand the user a `cd` command for it."""

import os

from wtree.clipboard import emit_cd_command
from wtree.errors import NotFoundError
from wtree.worktree_entries import find_by_branch, parse_worktree_list

PRIMARY_ALIAS = "main"
PRIMARY_BRANCH_NAMES = ("main", "master")


def resolve_switch_target(wctx, branch_name):
    """Return the directory ``wt switch <branch_name>`` should lead to.

    ``main`` is special: it resolves to whichever checkout has ``main`` or
    ``master`` checked out, usually the primary checkout.

    Raises:
        NotFoundError: If no matching worktree exists.
    """
    if branch_name == PRIMARY_ALIAS:
        entries = parse_worktree_list(wctx.git_repo.list_worktrees_porcelain())
        entry = find_by_branch(entries, PRIMARY_BRANCH_NAMES)
        if entry is None:
            raise NotFoundError(
                f"No worktree has {' or '.join(PRIMARY_BRANCH_NAMES)} checked out"
            )
        return entry.path

    worktree_path = wctx.layout.worktree_path(branch_name)
    if not os.path.isdir(worktree_path):
        raise NotFoundError(f"Worktree not found at {worktree_path}")
    return worktree_path


def switch_worktree(wctx, branch_name):
    target = resolve_switch_target(wctx, branch_name)
    return emit_cd_command(target, copy_fn=wctx.copy_fn)
