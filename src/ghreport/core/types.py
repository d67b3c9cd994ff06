"""Enums and aliases shared across ghreport."""

from __future__ import annotations

from enum import StrEnum


class Stage(StrEnum):
    SETUP = "setup"
    GENERATE = "generate"
    STORE = "store"


class FileType(StrEnum):
    CSV = "csv"
    JSON = "json"


CONTENT_TYPES: dict[FileType, str] = {
    FileType.CSV: "text/csv",
    FileType.JSON: "application/json",
}

ObjectKey = str
