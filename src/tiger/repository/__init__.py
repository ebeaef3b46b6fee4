"""Tiger repository layer — live git context and commit drafts."""

from __future__ import annotations

from tiger.repository.context import RepositoryContext, RepositoryError
from tiger.repository.draft import DraftCommitCoordinator

__all__ = [
    "DraftCommitCoordinator",
    "RepositoryContext",
    "RepositoryError",
]
