"""Parse `git worktree list --porcelain` output into WorktreeEntry records."""

from dataclasses import dataclass
from typing import List, Optional

BRANCH_REF_PREFIX = "refs/heads/"


@dataclass
class WorktreeEntry:
    """One worktree as reported by git."""

    path: str
    head: Optional[str] = None
    branch: Optional[str] = None
    bare: bool = False
    detached: bool = False


def parse_worktree_list(porcelain: str) -> List[WorktreeEntry]:
    """Parse porcelain output into entries.

    Each record starts with a ``worktree <path>`` line and is followed by
    optional ``HEAD``, ``branch``, ``bare`` and ``detached`` lines. Records are
    separated by blank lines. Unknown lines (``locked``, ``prunable``) are
    ignored.
    """
    entries = []
    current = None
    for line in porcelain.splitlines():
        if line.startswith("worktree "):
            current = WorktreeEntry(path=line[len("worktree "):])
            entries.append(current)
        elif current is None:
            continue
        elif line.startswith("HEAD "):
            current.head = line[len("HEAD "):]
        elif line.startswith("branch "):
            current.branch = _short_branch_name(line[len("branch "):])
        elif line == "bare":
            current.bare = True
        elif line == "detached":
            current.detached = True
    return entries


def find_by_branch(entries: List[WorktreeEntry], branch_names) -> Optional[WorktreeEntry]:
    """Return the first entry checked out on any of *branch_names*."""
    for entry in entries:
        if entry.branch in branch_names:
            return entry
    return None


def _short_branch_name(ref):
    if ref.startswith(BRANCH_REF_PREFIX):
        return ref[len(BRANCH_REF_PREFIX):]
    return ref
