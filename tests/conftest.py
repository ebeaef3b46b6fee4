"""Shared test fixtures."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _prevent_real_subprocesses() -> Iterator[None]:
    """Safety: block real git/editor/pager launches in all tests."""
    blocked = RuntimeError("real subprocess launched in test")
    with (
        patch("subprocess.run", side_effect=blocked),
        patch("subprocess.Popen", side_effect=blocked),
    ):
        yield


@pytest.fixture
def tmp_path(tmp_path: Path) -> Path:
    """The per-test directory with symlinks resolved, so it matches os.getcwd()."""
    return tmp_path.resolve()
