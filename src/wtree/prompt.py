"""Single-keystroke yes/no confirmation for interactive commands."""

import sys
from dataclasses import dataclass, field
from typing import Callable

import click


def read_single_char(prompt_text: str) -> str:
    """Show *prompt_text* and return one keystroke without waiting for Enter.

    When stdin is not a terminal (piped input, scripts, CI) the first character
    of stdin is used instead.

    Raises:
        EOFError: If stdin is closed before a character arrives.
    """
    click.echo(prompt_text, nl=False)
    if sys.stdin.isatty():
        reply = click.getchar()
    else:
        reply = sys.stdin.read(1)
        if not reply:
            raise EOFError
    click.echo()
    return reply


@dataclass
class ConfirmConfig:
    """Input configuration for confirmation prompts."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: read_single_char)


def confirm(question, *, config=None):
    """Ask *question* and return True only when the answer is ``y`` or ``Y``.

    Args:
        question: Prompt text, shown as ``<question> (y/n) ``.
        config: ConfirmConfig with the input function (defaults apply).

    Returns:
        True when confirmed. EOF (e.g. closed stdin) and an unreadable
        terminal count as a refusal.
    """
    if config is None:
        config = ConfirmConfig()
    try:
        reply = config.input_fn(f"{question} (y/n) ")
    except (EOFError, OSError):
        click.echo()
        return False
    return reply in ("y", "Y")
