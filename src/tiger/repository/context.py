"""RepositoryContext — live git queries for the working tree, branch, and config."""

from __future__ import annotations

from tiger.process import ProcessRunner


class RepositoryError(Exception):
    """Raised when a repository query fails."""


class RepositoryContext:
    """Queries git for repository state on every call; nothing is cached."""

    BRANCH_MARKER = "* "

    def __init__(self, runner: ProcessRunner, git: str = "git") -> None:
        self._runner = runner
        self._git = git

    def work_tree_root(self) -> str:
        """Get the root of the current working tree.

        Returns:
            The first worktree path listed by git (e.g. '/home/me/project').

        Raises:
            RepositoryError: If git reports no repository.
        """
        result = self._runner.capture_output([self._git, "worktree", "list", "--porcelain"])
        if not result.ok:
            raise RepositoryError(result.stderr.strip() or result.error)
        trees = self._parse_porcelain(result.stdout)
        if not trees or "worktree" not in trees[0]:
            raise RepositoryError("no worktree listed")
        return trees[0]["worktree"].strip()

    def config_value(self, key: str) -> str:
        """Read a git config value, trimmed.

        Raises:
            RepositoryError: If the key is unset or git fails.
        """
        result = self._runner.capture_output([self._git, "config", key])
        if not result.ok:
            raise RepositoryError(f"{key}: {result.stderr.strip() or result.error}")
        return result.stdout.strip()

    def current_branch(self) -> str:
        """Return the checked-out branch name, or '' when it cannot be found."""
        result = self._runner.capture_output([self._git, "branch"])
        if not result.ok:
            return ""
        for line in result.stdout.split("\n"):
            if line.startswith(self.BRANCH_MARKER):
                return line.removeprefix(self.BRANCH_MARKER)
        return ""

    def _parse_porcelain(self, output: str) -> list[dict[str, str]]:
        """Parse git worktree list --porcelain output into dicts."""
        trees: list[dict[str, str]] = []
        current: dict[str, str] = {}
        for line in output.splitlines():
            if line == "":
                if current:
                    trees.append(current)
                    current = {}
            else:
                key, _, value = line.partition(" ")
                current[key] = value
        if current:
            trees.append(current)
        return trees
