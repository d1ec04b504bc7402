"""
Output side: name, write and optionally index generated variants.

File names depend only on the position of a variant in the run's output
sequence (`crushed_0.rs`, `crushed_1.rs`, ...).
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TypedDict

import pandas as pd

DEFAULT_PREFIX = "crushed"

MANIFEST_COLUMNS = [
    "index",
    "file",
    "strategy",
    "source_path",
    "source_fingerprint",
    "start_byte",
    "end_byte",
    "replacement",
]


class ManifestRecord(TypedDict):
    index: int
    file: str
    strategy: str
    source_path: str
    source_fingerprint: str
    start_byte: int
    end_byte: int
    replacement: str


def variant_file_name(index: int, *, prefix: str = DEFAULT_PREFIX, extension: str = "rs") -> str:
    ext = extension.lstrip(".")
    return f"{prefix}_{index}.{ext}"


def prepare_output_dir(output_dir: str | Path | None) -> Path:
    if output_dir is None:
        current_dir = Path.cwd()
        print(f"No output directory provided, using current directory: {current_dir}")
        return current_dir

    path = Path(output_dir)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        print(f"Created output directory: {path}")
    elif not path.is_dir():
        raise NotADirectoryError(f"output path is not a directory: {path}")
    return path


def write_variants(
    variants: Iterable[str],
    *,
    output_dir: Path,
    prefix: str = DEFAULT_PREFIX,
    extension: str = "rs",
    start: int = 0,
) -> list[Path]:
    written: list[Path] = []
    for offset, text in enumerate(variants):
        file_path = output_dir / variant_file_name(start + offset, prefix=prefix, extension=extension)
        # newline="" keeps the variant byte-for-byte identical to what was spliced
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        written.append(file_path)
    return written


def write_manifest(records: Sequence[ManifestRecord], output_path: str | Path) -> None:
    rows: list[dict[str, Any]] = [dict(r) for r in records]
    df = pd.DataFrame(rows, columns=MANIFEST_COLUMNS)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
