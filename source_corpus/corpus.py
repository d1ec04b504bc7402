from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from pathlib import Path


class SourceReadError(Exception):
    """A selected input could not be read as UTF-8 text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


@dataclass(frozen=True)
class SourceFile:
    path: Path
    text: str
    ordinal: int
    fingerprint: str


def _fingerprint_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()[:16]


def _normalize_extension(extension: str) -> str:
    ext = extension.strip()
    if not ext:
        raise ValueError("extension must not be empty")
    return ext if ext.startswith(".") else f".{ext}"


def read_source(path: str | Path, *, ordinal: int = 0) -> SourceFile:
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise SourceReadError(file_path, exc.strerror or str(exc)) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceReadError(file_path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    return SourceFile(
        path=file_path,
        text=text,
        ordinal=ordinal,
        fingerprint=_fingerprint_bytes(data),
    )


def discover_sources(root: str | Path, *, extension: str) -> list[Path]:
    """
    Recursively collect regular files under root whose suffix is extension.

    Paths are returned sorted so that variant numbering is stable across
    runs and file systems.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise SourceReadError(root_path, "not a directory")
    suffix = _normalize_extension(extension)

    found: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root_path):
        for name in filenames:
            candidate = Path(dirpath) / name
            if candidate.suffix == suffix and candidate.is_file():
                found.append(candidate)
    return sorted(found)

