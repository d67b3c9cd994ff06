"""Subprocess backend implementing IProcessExecutor."""

from __future__ import annotations

import os
import subprocess
from typing import Mapping, Sequence

from ghreport.core.exceptions import ExecutionError
from ghreport.models.run import ExecutionResult


class SubprocessExecutor:
    """Runs a local executable with stdout and stderr merged into one stream.

    ``env`` is overlaid on a copy of the parent environment and handed to the
    child only; ``os.environ`` is left untouched.
    """

    def run(
        self,
        executable: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ExecutionResult:
        child_env = {**os.environ, **env} if env else None
        try:
            proc = subprocess.run(
                [executable, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=child_env,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(
                f"{executable} timed out after {timeout}s", output=exc.output or b"",
            ) from exc
        except OSError as exc:
            raise ExecutionError(f"failed to start {executable}: {exc}") from exc

        result = ExecutionResult(output=proc.stdout or b"", returncode=proc.returncode)
        if not result.succeeded:
            raise ExecutionError(
                f"exit status {proc.returncode}", returncode=proc.returncode, output=result.output,
            )
        return result
