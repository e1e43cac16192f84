"""Fixtures that build real git repositories for wt integration tests."""

import pyperclip
import pytest
from git import Repo


@pytest.fixture
def git_project(tmp_path):
    """A repository at <tmp>/myproject on branch main with one commit.

    ``.env`` is ignored, matching how projects usually keep it out of git.
    """
    root = tmp_path / "myproject"
    root.mkdir()
    repo = Repo.init(root, initial_branch="main")
    repo.config_writer().set_value("user", "email", "test@test.com").release()
    repo.config_writer().set_value("user", "name", "Test").release()

    (root / "README.md").write_text("# Test Repo")
    (root / ".gitignore").write_text(".env\n")
    repo.index.add(["README.md", ".gitignore"])
    repo.index.commit("Initial commit")
    return root, repo


@pytest.fixture
def clipboard(monkeypatch):
    """Capture pyperclip.copy calls instead of touching the real clipboard."""
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied
