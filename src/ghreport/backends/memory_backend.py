"""In-memory collaborators for unit tests: dict/script-backed fakes."""

from __future__ import annotations

from typing import Any, BinaryIO, Mapping, Sequence

from ghreport.core.exceptions import ExecutionError, SecretLookupError, UploadError
from ghreport.models.run import ExecutionResult


class MemorySecretResolver:
    """Dict-backed ISecretResolver for unit tests."""

    def __init__(self, params: dict[str, str] | None = None) -> None:
        self._params: dict[str, str] = dict(params or {})
        self.calls: list[tuple[str, bool]] = []

    def put(self, name: str, value: str) -> None:
        self._params[name] = value

    def resolve(self, name: str, decrypt: bool = True) -> str:
        self.calls.append((name, decrypt))
        try:
            return self._params[name]
        except KeyError:
            raise SecretLookupError(f"ParameterNotFound: {name}") from None


class ScriptedExecutor:
    """IProcessExecutor that replays a fixed list of outcomes.

    Each entry is either an ``ExecutionResult`` (returned, or raised as
    ``ExecutionError`` when its return code is non-zero) or an exception to
    raise. The last entry repeats once the script runs out.
    """

    def __init__(self, outcomes: Sequence[ExecutionResult | Exception] | None = None) -> None:
        self._outcomes = list(outcomes or [ExecutionResult(output=b"ok")])
        self.calls: list[dict[str, Any]] = []

    def run(
        self,
        executable: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ExecutionResult:
        self.calls.append({
            "executable": executable,
            "args": list(args),
            "env": dict(env or {}),
            "timeout": timeout,
        })
        idx = min(len(self.calls), len(self._outcomes)) - 1
        outcome = self._outcomes[idx]
        if isinstance(outcome, Exception):
            raise outcome
        if not outcome.succeeded:
            raise ExecutionError(
                f"exit status {outcome.returncode}",
                returncode=outcome.returncode,
                output=outcome.output,
            )
        return outcome


class MemoryArtifactUploader:
    """Dict-backed IArtifactUploader for unit tests."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self._fail_with = fail_with
        self.objects: dict[tuple[str, str], bytes] = {}
        self.calls: list[dict[str, Any]] = []

    def upload(
        self, bucket: str, key: str, body: BinaryIO, content_type: str | None = None
    ) -> str:
        self.calls.append({"bucket": bucket, "key": key, "content_type": content_type})
        if self._fail_with is not None:
            raise UploadError(str(self._fail_with)) from self._fail_with
        self.objects[(bucket, key)] = body.read()
        return f"memory://{bucket}/{key}"
