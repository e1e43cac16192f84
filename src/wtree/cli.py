"""Top-level Click group for the wt CLI."""

import click

from wtree.completion import complete_worktree_branches, completion
from wtree.context import build_context
from wtree.errors import UnknownCommandError, ValidationError
from wtree.worktrees.create import create_worktree
from wtree.worktrees.listing import list_worktrees
from wtree.worktrees.remove import remove_worktree
from wtree.worktrees.switch import switch_worktree

COMMAND_ALIASES = {
    "delete": "rm",
    "list": "ls",
}


class AliasedGroup(click.Group):
    """Group that accepts command aliases and exits 1 on any usage error."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            raise UnknownCommandError(f"Unknown command '{e.option_name}'", ctx=ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if (
            not ctx.resilient_parsing
            and not cmd_name.startswith("-")
            and self.get_command(ctx, cmd_name) is None
        ):
            raise UnknownCommandError(f"Unknown command '{cmd_name}'", ctx=ctx)
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args


def _worktree_context(ctx):
    """Return the invocation's WorktreeContext, resolving the repository on first use."""
    root = ctx.find_root()
    if root.obj is None:
        root.obj = build_context()
    return root.obj


def _require_branch(ctx, branch):
    if not branch:
        raise ValidationError("branch name required", ctx=ctx)
    return branch


def _branch_argument(fn):
    return click.argument(
        "branch", required=False, shell_complete=complete_worktree_branches
    )(fn)


@click.group(
    "wt",
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.pass_context
def main(ctx):
    """Manage git worktrees in a <project>.wt directory next to the repository.

    \b
    Examples:
      wt add improve-git-usage
      wt switch improve-git-usage
      wt rm improve-git-usage
      wt ls
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        click.echo()
        list_worktrees(_worktree_context(ctx))


@main.command("add")
@_branch_argument
@click.pass_context
def add_cmd(ctx, branch):
    """Create a new worktree with the given branch name."""
    branch = _require_branch(ctx, branch)
    create_worktree(_worktree_context(ctx), branch)


@main.command("rm")
@_branch_argument
@click.pass_context
def rm_cmd(ctx, branch):
    """Remove a worktree and its branch (alias: delete)."""
    branch = _require_branch(ctx, branch)
    remove_worktree(_worktree_context(ctx), branch)


@main.command("ls")
@click.pass_context
def ls_cmd(ctx):
    """List all active worktrees (alias: list)."""
    list_worktrees(_worktree_context(ctx))


@main.command("switch")
@_branch_argument
@click.pass_context
def switch_cmd(ctx, branch):
    """Copy a cd command for a worktree to the clipboard ('main' for the primary checkout)."""
    branch = _require_branch(ctx, branch)
    switch_worktree(_worktree_context(ctx), branch)


main.add_command(completion)
