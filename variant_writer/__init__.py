from __future__ import annotations

from .writer import (
    DEFAULT_PREFIX,
    MANIFEST_COLUMNS,
    ManifestRecord,
    prepare_output_dir,
    variant_file_name,
    write_manifest,
    write_variants,
)

__all__ = [
    "DEFAULT_PREFIX",
    "MANIFEST_COLUMNS",
    "ManifestRecord",
    "prepare_output_dir",
    "variant_file_name",
    "write_manifest",
    "write_variants",
]
