"""Process data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProcessResult(BaseModel):
    """Terminal result of one external invocation.

    Failures are values, not exceptions: ``error`` is set for both a
    non-zero exit and a launch failure, and the caller decides what to do.
    """

    model_config = ConfigDict(frozen=True)

    args: list[str]
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the program launched and exited with status 0."""
        return self.error is None

    @classmethod
    def exited(
        cls, args: list[str], returncode: int, stdout: str = "", stderr: str = ""
    ) -> ProcessResult:
        """Build a result from an exit status."""
        error = None if returncode == 0 else f"exit status {returncode}"
        return cls(args=args, returncode=returncode, stdout=stdout, stderr=stderr, error=error)

    @classmethod
    def launch_failed(cls, args: list[str], exc: OSError) -> ProcessResult:
        """Build a result for a program that could not be started."""
        return cls(args=args, error=str(exc))
