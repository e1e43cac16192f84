"""Generate shell completion scripts for the wt CLI."""

import os

import click
from click.shell_completion import CompletionItem, get_completion_class

from wtree.context import build_context
from wtree.errors import WorktreeError
from wtree.worktree_entries import parse_worktree_list
from wtree.worktrees.switch import PRIMARY_ALIAS

SHELLS = ("bash", "zsh", "fish")


def complete_worktree_branches(ctx, param, incomplete):
    """Complete branch arguments with the worktrees under the <project>.wt directory."""
    try:
        wctx = build_context()
        porcelain = wctx.git_repo.list_worktrees_porcelain()
    except WorktreeError:
        return []
    base = wctx.layout.worktree_base
    names = [PRIMARY_ALIAS] if ctx.command.name == "switch" else []
    for entry in parse_worktree_list(porcelain):
        if entry.path.startswith(base + os.sep):
            names.append(os.path.relpath(entry.path, base))
    return [CompletionItem(name) for name in names if name.startswith(incomplete)]


def _install_help(prog_name):
    return "\n".join([
        f"Print a completion script for {', '.join(SHELLS)}.",
        "",
        "Branch arguments of `rm` and `switch` complete to the worktrees in the",
        f"<project>.wt directory; `switch` also offers '{PRIMARY_ALIAS}'.",
        "",
        "To install, add to your shell config:",
        f'  eval "$({prog_name} completion zsh)"',
    ])


@click.command("completion")
@click.argument("shell", type=click.Choice(SHELLS), required=False)
@click.pass_context
def completion(ctx, shell):
    """Print a shell completion script for wt."""
    root = ctx.find_root()
    if shell is None:
        click.echo(_install_help(root.info_name))
        return
    script = get_completion_class(shell)(
        cli=root.command,
        ctx_args={},
        prog_name=root.info_name,
        complete_var=f"_{root.info_name.upper()}_COMPLETE",
    )
    click.echo(script.source())
