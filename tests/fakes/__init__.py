"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from ghreport.backends.memory_backend import (
    MemoryArtifactUploader,
    MemorySecretResolver,
    ScriptedExecutor,
)

__all__ = ["MemoryArtifactUploader", "MemorySecretResolver", "ScriptedExecutor"]
