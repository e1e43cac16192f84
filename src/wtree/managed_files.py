"""Copy untracked environment files from the primary checkout into a new worktree."""

import os
import shutil

from wtree.errors import ToolError

MANAGED_FILES = (
    ".env",
    "node_modules",
    ".claude/settings.local.json",
)


def copy_managed_files(source_root, dest_root, entries=MANAGED_FILES):
    """Copy each entry that exists under *source_root* to the same relative path under *dest_root*.

    Directories are copied recursively and symlinks are preserved as links.
    Entries missing from *source_root* are skipped.

    Returns:
        The entries that were copied, in order.

    Raises:
        ToolError: If a copy fails.
    """
    copied = []
    for entry in entries:
        source = os.path.join(source_root, entry)
        if not os.path.lexists(source):
            continue
        dest = os.path.join(dest_root, entry)
        try:
            _copy_entry(source, dest)
        except (OSError, shutil.Error) as e:
            raise ToolError(f"Failed to copy {entry}: {e}")
        copied.append(entry)
    return copied


def _copy_entry(source, dest):
    os.makedirs(os.path.dirname(dest), exist_ok=True)
    if os.path.isdir(source) and not os.path.islink(source):
        shutil.copytree(source, dest, symlinks=True, dirs_exist_ok=True)
    else:
        shutil.copy2(source, dest, follow_symlinks=False)
