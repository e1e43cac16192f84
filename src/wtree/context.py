"""WorktreeContext: bundles the collaborators every wt command needs."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from wtree.git_repository import GitRepository
from wtree.layout import RepoLayout, resolve_layout
from wtree.prompt import ConfirmConfig


@dataclass
class WorktreeContext:
    """Repository layout, git gateway and interactive capabilities for one invocation."""

    layout: RepoLayout
    git_repo: object
    confirm_config: ConfirmConfig = field(default_factory=ConfirmConfig)
    copy_fn: Optional[Callable[[str], None]] = None


def build_context(cwd=None):
    """Resolve the primary checkout from *cwd* and open a gateway rooted there."""
    layout = resolve_layout(GitRepository.discover(cwd))
    git_repo = GitRepository.discover(layout.primary_root)
    return WorktreeContext(layout=layout, git_repo=git_repo)
