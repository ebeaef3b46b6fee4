"""ProcessRunner — launches external programs for the shell session."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from loguru import logger

from tiger.process.models import ProcessResult


class ProcessRunner:
    """Runs external programs in the session's current working directory.

    Every method returns a ProcessResult; nothing here raises for a missing
    executable or a non-zero exit.
    """

    def capture_output(self, args: Sequence[str]) -> ProcessResult:
        """Run to completion, capturing stdout and stderr as text."""
        argv = list(args)
        logger.debug("capture: {}", argv)
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            return ProcessResult.launch_failed(argv, exc)
        return ProcessResult.exited(argv, result.returncode, result.stdout, result.stderr)

    def attach(self, args: Sequence[str]) -> ProcessResult:
        """Run to completion with the session's own stdin/stdout/stderr."""
        argv = list(args)
        logger.debug("attach: {}", argv)
        try:
            result = subprocess.run(argv, check=False)
        except OSError as exc:
            return ProcessResult.launch_failed(argv, exc)
        return ProcessResult.exited(argv, result.returncode)

    def attach_with_pipe(self, args: Sequence[str], reader_args: Sequence[str]) -> ProcessResult:
        """Run ``args`` with its stdout piped into ``reader_args``.

        The reader inherits the session's stdout. Ordering: the writer is
        waited on first, then our copy of the pipe's write end is closed,
        and only then is the reader waited on, so the reader always sees
        end-of-input. If the writer fails the reader is not waited on, but
        the write end is still closed.
        """
        argv = list(args)
        reader_argv = list(reader_args)
        logger.debug("attach with pipe: {} | {}", argv, reader_argv)

        read_fd, write_fd = os.pipe()
        try:
            try:
                writer = subprocess.Popen(argv, stdout=write_fd)
            except OSError as exc:
                os.close(read_fd)
                return ProcessResult.launch_failed(argv, exc)

            try:
                reader = subprocess.Popen(reader_argv, stdin=read_fd)
            except OSError as exc:
                writer.kill()
                writer.wait()
                return ProcessResult.launch_failed(reader_argv, exc)
            finally:
                os.close(read_fd)

            returncode = writer.wait()
        finally:
            os.close(write_fd)

        if returncode != 0:
            return ProcessResult.exited(argv, returncode)
        return ProcessResult.exited(reader_argv, reader.wait())
