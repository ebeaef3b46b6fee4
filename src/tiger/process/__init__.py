"""Tiger process layer — capture, attach, and pipe-chain invocations."""

from __future__ import annotations

from tiger.process.models import ProcessResult
from tiger.process.runner import ProcessRunner

__all__ = [
    "ProcessResult",
    "ProcessRunner",
]
