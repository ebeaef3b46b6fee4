"""Tests for repository.context — live git queries."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tiger.process import ProcessResult
from tiger.repository import RepositoryContext, RepositoryError


def _make_context(
    stdout: str = "", returncode: int = 0, stderr: str = ""
) -> tuple[RepositoryContext, MagicMock]:
    """Helper: a context whose runner returns one canned result."""
    runner = MagicMock()
    runner.capture_output.side_effect = lambda args: ProcessResult.exited(
        args, returncode, stdout, stderr
    )
    return RepositoryContext(runner), runner


class TestWorkTreeRoot:
    """Test work_tree_root()."""

    PORCELAIN_OUTPUT = (
        "worktree /home/me/project\n"
        "HEAD abc123\n"
        "branch refs/heads/main\n"
        "\n"
        "worktree /home/me/project/.trees/feature\n"
        "HEAD def456\n"
        "branch refs/heads/feature\n"
        "\n"
    )

    def test_runs_worktree_list_porcelain(self) -> None:
        """work_tree_root() runs git worktree list --porcelain."""
        ctx, runner = _make_context(self.PORCELAIN_OUTPUT)
        ctx.work_tree_root()
        runner.capture_output.assert_called_once_with(["git", "worktree", "list", "--porcelain"])

    def test_returns_first_worktree_without_prefix(self) -> None:
        """work_tree_root() returns the first listed path with 'worktree ' stripped."""
        ctx, _ = _make_context(self.PORCELAIN_OUTPUT)
        assert ctx.work_tree_root() == "/home/me/project"

    def test_keeps_spaces_in_path(self) -> None:
        """Paths containing spaces survive parsing."""
        ctx, _ = _make_context("worktree /home/me/my project\nHEAD abc\n")
        assert ctx.work_tree_root() == "/home/me/my project"

    def test_raises_outside_repository(self) -> None:
        """work_tree_root() raises RepositoryError when git fails."""
        ctx, _ = _make_context("", 128, "fatal: not a git repository")
        with pytest.raises(RepositoryError, match="not a git repository"):
            ctx.work_tree_root()

    def test_raises_on_empty_listing(self) -> None:
        """work_tree_root() raises RepositoryError when nothing is listed."""
        ctx, _ = _make_context("")
        with pytest.raises(RepositoryError):
            ctx.work_tree_root()

    def test_uses_configured_git(self) -> None:
        """The configured executable name is used."""
        runner = MagicMock()
        runner.capture_output.return_value = ProcessResult.exited([], 0, "worktree /r\n")
        RepositoryContext(runner, git="/opt/git/bin/git").work_tree_root()
        assert runner.capture_output.call_args[0][0][0] == "/opt/git/bin/git"


class TestConfigValue:
    """Test config_value()."""

    def test_returns_trimmed_value(self) -> None:
        """config_value() trims surrounding whitespace."""
        ctx, runner = _make_context("  less -RFX \n")
        assert ctx.config_value("core.pager") == "less -RFX"
        runner.capture_output.assert_called_once_with(["git", "config", "core.pager"])

    def test_raises_when_unset(self) -> None:
        """config_value() raises RepositoryError when git exits non-zero."""
        ctx, _ = _make_context("", 1)
        with pytest.raises(RepositoryError, match="core.editor"):
            ctx.config_value("core.editor")


class TestCurrentBranch:
    """Test current_branch()."""

    def test_extracts_marked_line(self) -> None:
        """current_branch() returns the marked line without its marker."""
        ctx, _ = _make_context("  develop\n* feat/prompt\n  main\n")
        assert ctx.current_branch() == "feat/prompt"

    def test_detached_head(self) -> None:
        """A detached HEAD line is returned as-is after the marker."""
        ctx, _ = _make_context("* (HEAD detached at 1a2b3c4)\n  main\n")
        assert ctx.current_branch() == "(HEAD detached at 1a2b3c4)"

    def test_empty_when_no_marker(self) -> None:
        """current_branch() returns '' when no line is marked."""
        ctx, _ = _make_context("  develop\n  main\n")
        assert ctx.current_branch() == ""

    def test_empty_when_git_fails(self) -> None:
        """current_branch() never raises."""
        ctx, _ = _make_context("", 128, "fatal: not a git repository")
        assert ctx.current_branch() == ""

    def test_requeries_every_call(self) -> None:
        """Nothing is cached between calls."""
        ctx, runner = _make_context("* main\n")
        ctx.current_branch()
        ctx.current_branch()
        assert runner.capture_output.call_count == 2
