from __future__ import annotations

import argparse
import functools
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TypedDict

from mutator import CrushStrategy, Variant, crush_variants, get_strategy, list_versions as strategy_versions
from parser import ParseError, get_parser, list_versions as parser_versions
from source_corpus import SourceFile, SourceReadError, discover_sources, read_source
from variant_writer import (
    DEFAULT_PREFIX,
    ManifestRecord,
    prepare_output_dir,
    write_manifest,
    write_variants,
)


class CrushConfig(TypedDict):
    input_file: str | None
    input_dir: str | None
    output_dir: str | None
    strategy: str
    grammar: str
    extension: str
    prefix: str
    manifest: str | None
    keep_going: bool
    dry_run: bool
    quiet: bool


def build_config(argv: Sequence[str] | None = None) -> CrushConfig:
    parser = argparse.ArgumentParser(
        description="Generate syntactic mutants of Rust sources: one output file per "
        "(location, replacement) pair for the selected crush strategy."
    )
    inputs = parser.add_mutually_exclusive_group()
    inputs.add_argument(
        "--input-file",
        dest="input_file",
        default=None,
        help="Single source file to crush.",
    )
    inputs.add_argument(
        "-i",
        "--input-dir",
        dest="input_dir",
        default=None,
        help="Directory scanned recursively for files with --extension.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Where variants are written (created if missing; default: current directory).",
    )
    parser.add_argument(
        "--strategy",
        default="struct",
        choices=list(strategy_versions()),
        help="struct: flip struct declaration forms; typename: replace every type name.",
    )
    parser.add_argument(
        "--grammar",
        default="rust",
        choices=list(parser_versions()),
        help="Source grammar.",
    )
    parser.add_argument(
        "--extension",
        default=None,
        help="File extension scanned in directory mode and used for outputs "
        "(default: the grammar's extension).",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help="Output file name prefix; files are named <prefix>_<index>.<extension>.",
    )
    parser.add_argument(
        "--manifest",
        default=None,
        help="Optional CSV path listing each written variant and the span it replaced.",
    )
    parser.add_argument(
        "--keep-going",
        dest="keep_going",
        action="store_true",
        help="In directory mode, skip unreadable or unparseable files instead of aborting.",
    )
    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Only report how many variants would be generated.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress per-file progress lines.",
    )

    args = parser.parse_args(argv)

    if args.input_file is None and args.input_dir is None:
        parser.error("No input file or directory provided")

    extension = args.extension
    if extension is None:
        extension = get_parser(args.grammar).DEFAULT_EXTENSION
    extension = extension.strip().lstrip(".")
    if not extension:
        parser.error("--extension must name a file extension, e.g. rs")

    return {
        "input_file": args.input_file,
        "input_dir": args.input_dir,
        "output_dir": args.output_dir,
        "strategy": args.strategy,
        "grammar": args.grammar,
        "extension": extension,
        "prefix": args.prefix,
        "manifest": args.manifest,
        "keep_going": args.keep_going,
        "dry_run": args.dry_run,
        "quiet": args.quiet,
    }


def crush_file(
    source: SourceFile,
    *,
    strategy: CrushStrategy,
    parser_api: Any,
) -> list[Variant]:
    parse = functools.partial(parser_api.parse_source, path=source.path)
    return crush_variants(source.text, strategy=strategy, parse=parse)


def collect_variants(
    config: CrushConfig,
    *,
    strategy: CrushStrategy,
    parser_api: Any,
) -> tuple[list[tuple[SourceFile, Variant]], list[str]]:
    """
    Crush every selected input in order and return (source, variant) pairs
    plus diagnostics for skipped files.

    Without keep_going the first read or parse failure propagates.
    """
    if config["input_file"] is not None:
        source = read_source(config["input_file"])
        variants = crush_file(source, strategy=strategy, parser_api=parser_api)
        return [(source, v) for v in variants], []

    paths = discover_sources(config["input_dir"], extension=config["extension"])
    collected: list[tuple[SourceFile, Variant]] = []
    skipped: list[str] = []
    total = len(paths)
    for ordinal, path in enumerate(paths):
        try:
            source = read_source(path, ordinal=ordinal)
            variants = crush_file(source, strategy=strategy, parser_api=parser_api)
        except (SourceReadError, ParseError) as exc:
            if not config["keep_going"]:
                raise
            print(f"[!] skipping {exc}", file=sys.stderr)
            skipped.append(str(exc))
            continue
        collected.extend((source, v) for v in variants)
        if not config["quiet"]:
            print(f"[{ordinal + 1}/{total}] {path}: {len(variants)} variants")
    return collected, skipped


def _manifest_records(
    pairs: list[tuple[SourceFile, Variant]],
    written: list[Path],
    *,
    strategy: str,
) -> list[ManifestRecord]:
    records: list[ManifestRecord] = []
    for index, ((source, variant), file_path) in enumerate(zip(pairs, written)):
        records.append(
            {
                "index": index,
                "file": file_path.name,
                "strategy": strategy,
                "source_path": str(source.path),
                "source_fingerprint": source.fingerprint,
                "start_byte": variant.target.start_byte,
                "end_byte": variant.target.end_byte,
                "replacement": variant.replacement,
            }
        )
    return records


def run(config: CrushConfig) -> int:
    strategy = get_strategy(config["strategy"])
    parser_api = get_parser(config["grammar"])

    try:
        pairs, skipped = collect_variants(config, strategy=strategy, parser_api=parser_api)
    except (SourceReadError, ParseError) as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    print(f"Number of generated files: {len(pairs)}")
    if skipped:
        print(f"Skipped files: {len(skipped)}")
    if config["dry_run"]:
        return 0

    try:
        output_dir = prepare_output_dir(config["output_dir"])
        written = write_variants(
            (variant.text for _, variant in pairs),
            output_dir=output_dir,
            prefix=config["prefix"],
            extension=config["extension"],
        )
        if config["manifest"] is not None:
            write_manifest(
                _manifest_records(pairs, written, strategy=config["strategy"]),
                config["manifest"],
            )
    except OSError as exc:
        print(f"[!] cannot write output: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    config = build_config(argv)
    return run(config)


def typename_main(argv: Sequence[str] | None = None) -> int:
    """Entry point defaulting to the typename strategy; --strategy still overrides."""
    args = list(sys.argv[1:] if argv is None else argv)
    return main(["--strategy", "typename", *args])


if __name__ == "__main__":
    sys.exit(main())
