"""CLI for TypeScript declaration generation and freshness checks."""

import argparse
import sys
from pathlib import Path

from jswrap_dts.exceptions import SourceReadError
from jswrap_dts.logging import setup_logging
from jswrap_dts.settings import Settings, settings
from jswrap_dts.typegen.pipeline import GenerationResult, discover_sources, generate_document


def main(argv: list[str] | None = None) -> int:
    """Entry point with generate/check subcommands."""
    parser = argparse.ArgumentParser(description="TypeScript declarations from /*JSON annotation blocks")
    parser.add_argument("--source-dir", type=Path, help="Directory searched for wrapper sources")
    parser.add_argument("--pattern", help="File name glob for wrapper sources")
    parser.add_argument("--output", type=Path, help="Declaration file path")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Level of diagnostic logging on stderr")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("generate", help="Write the declaration file")
    subparsers.add_parser("check", help="Verify the declaration file is up-to-date")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    level = args.log_level or settings.log_level
    if level:
        setup_logging(level=level)

    source_dir, pattern, output = _resolve_options(args, settings)
    paths = discover_sources(source_dir, pattern)
    if not paths:
        print(f"FAIL: no files matching {pattern} under {source_dir}", file=sys.stderr)
        return 1

    try:
        result = generate_document(paths, settings.indent)
    except SourceReadError as exc:
        print(f"FAIL: {exc}", file=sys.stderr)
        return 1

    if args.command == "generate":
        return _run_generate(result, output, len(paths))
    return _run_check(result, output)


def _resolve_options(args: argparse.Namespace, config: Settings) -> tuple[Path, str, Path]:
    """Command line options override settings."""
    source_dir = args.source_dir or config.source_dir
    pattern = args.pattern or config.file_pattern
    output = args.output or config.output_path
    return source_dir, pattern, output


def _run_generate(result: GenerationResult, output: Path, file_count: int) -> int:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.document, encoding="utf-8")
    size = len(result.document.encode("utf-8"))
    print(f"  scanned {file_count} files, {len(result.records)} records, {result.declared_count} with declarations")
    print(f"  rendered {len(result.resolution.owners)} owners, {result.resolution.member_count} members, {len(result.resolution.free)} free declarations")
    for orphan in result.resolution.unresolved:
        print(f"  dropped {orphan}")
    for failure in result.failures:
        print(f"  malformed {failure}")
    print(f"  wrote {output} ({size:,} bytes)")
    return 0


def _run_check(result: GenerationResult, output: Path) -> int:
    if not output.is_file():
        print(f"FAIL: {output} does not exist. Run 'generate' first.", file=sys.stderr)
        return 1
    if output.read_text(encoding="utf-8") != result.document:
        print(f"FAIL: {output} is stale")
        return 1
    print(f"OK: {output} is up-to-date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
