"""Shared fixtures for wt unit tests."""

import os
import sys

import pytest

# Ensure tests/wt-unit/ is on sys.path so test files can import
# fake_git_repository and fake_context unambiguously (avoids conftest
# module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_context import ClipboardRecorder, make_context  # noqa: E402
from fake_git_repository import FakeGitRepository  # noqa: E402


@pytest.fixture
def primary_root(tmp_path):
    """An empty directory standing in for the primary checkout."""
    root = tmp_path / "myproject"
    root.mkdir()
    return root


@pytest.fixture
def fake_git_repo(primary_root):
    return FakeGitRepository(working_tree_dir=str(primary_root))


@pytest.fixture
def clipboard():
    return ClipboardRecorder()


@pytest.fixture
def wctx(primary_root, fake_git_repo, clipboard):
    return make_context(primary_root, git_repo=fake_git_repo, copy_fn=clipboard)
