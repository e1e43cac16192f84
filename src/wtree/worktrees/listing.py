"""Show git's own worktree listing."""

import click


def list_worktrees(wctx):
    click.echo("Current worktrees:")
    click.echo(wctx.git_repo.list_worktrees())
