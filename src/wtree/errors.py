"""Error taxonomy for wt.

Every error is a ClickException so the top-level group renders it as a single
``Error: ...`` line on stderr and exits with status 1.
"""

import click


class WorktreeError(click.ClickException):
    """Base class for all wt failures."""

    exit_code = 1


class AlreadyExistsError(WorktreeError):
    """A worktree directory is already present at the target path."""


class NotFoundError(WorktreeError):
    """A worktree directory (or the primary checkout) could not be found."""


class PreconditionError(WorktreeError):
    """The repository layout is not one wt knows how to handle."""


class ToolError(WorktreeError):
    """git or the file copy failed; the message is the tool's own output."""


class _UsageHelpError(click.UsageError):
    """Usage error that prints the error line followed by the full ``wt`` help."""

    exit_code = 1

    def show(self, file=None):
        if file is None:
            file = click.get_text_stream("stderr")
        color = self.ctx.color if self.ctx is not None else None
        click.echo(f"Error: {self.format_message()}", file=file, color=color)
        if self.ctx is not None:
            click.echo(self.ctx.find_root().get_help(), file=file, color=color)


class ValidationError(_UsageHelpError):
    """A required argument is missing."""


class UnknownCommandError(_UsageHelpError):
    """The first argument names no wt command."""
