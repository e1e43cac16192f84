"""Create a worktree on a new branch and copy environment files into it."""

import os

import click

from wtree.clipboard import emit_cd_command
from wtree.errors import AlreadyExistsError
from wtree.managed_files import MANAGED_FILES, copy_managed_files


def create_worktree(wctx, branch_name, managed_files=MANAGED_FILES):
    """Create ``<project>.wt/<branch_name>`` on a new branch named *branch_name*.

    Returns:
        Absolute path of the new worktree.

    Raises:
        AlreadyExistsError: If the target directory exists. No git command runs.
        ToolError: If git or the file copy fails.
    """
    worktree_path = wctx.layout.worktree_path(branch_name)
    if os.path.isdir(worktree_path):
        raise AlreadyExistsError(f"Worktree already exists at {worktree_path}")

    click.echo(f"Creating worktree at {worktree_path}...")
    wctx.git_repo.add_worktree(worktree_path, branch_name)

    click.echo("Copying environment files...")
    copied = copy_managed_files(wctx.layout.primary_root, worktree_path, managed_files)
    for entry in copied:
        click.echo(f"  ✓ {entry}")

    click.echo()
    click.echo("✓ Worktree created successfully")
    click.echo(f"  Location: {worktree_path}")
    click.echo(f"  Branch:   {branch_name}")
    click.echo()
    click.echo("Start developing:")
    emit_cd_command(worktree_path, copy_fn=wctx.copy_fn)
    return worktree_path
