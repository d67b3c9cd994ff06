"""Protocol interfaces for the pipeline's external collaborators.

Structural typing, no inheritance required: the real AWS/subprocess adapters
and the in-memory fakes both satisfy these by shape alone.
"""

from __future__ import annotations

from typing import BinaryIO, Mapping, Protocol, Sequence, runtime_checkable

from ghreport.models.run import ExecutionResult


# ---------------------------------------------------------------------------
# Secret Resolver
# ---------------------------------------------------------------------------

@runtime_checkable
class ISecretResolver(Protocol):
    """Parameter-store lookup returning a single decrypted value."""

    def resolve(self, name: str, decrypt: bool = True) -> str: ...


# ---------------------------------------------------------------------------
# Process Executor
# ---------------------------------------------------------------------------

@runtime_checkable
class IProcessExecutor(Protocol):
    """Runs an external command to completion, capturing combined output."""

    def run(
        self,
        executable: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ExecutionResult: ...


# ---------------------------------------------------------------------------
# Artifact Uploader
# ---------------------------------------------------------------------------

@runtime_checkable
class IArtifactUploader(Protocol):
    """Blob-store upload of a readable byte stream."""

    def upload(
        self, bucket: str, key: str, body: BinaryIO, content_type: str | None = None
    ) -> str: ...
