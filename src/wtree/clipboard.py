"""Hand the user a ready-to-run `cd` command, via the clipboard when possible."""

import os
import shlex

import click
import pyperclip


def cd_command(path):
    """Return ``cd <path>`` with the path made absolute, resolved and shell-quoted."""
    return f"cd {shlex.quote(os.path.realpath(path))}"


def emit_cd_command(path, copy_fn=None):
    """Copy the `cd` command for *path* to the clipboard, or print it if that fails.

    Args:
        path: Directory the user should change into.
        copy_fn: Clipboard writer; defaults to pyperclip.copy.

    Returns:
        The command string.
    """
    if copy_fn is None:
        copy_fn = pyperclip.copy
    command = cd_command(path)
    try:
        copy_fn(command)
    except pyperclip.PyperclipException as e:
        click.echo(f"Warning: could not copy to clipboard: {e}", err=True)
        click.echo(command)
        return command
    click.echo(f"Copied to clipboard: {command}")
    return command
