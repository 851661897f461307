"""End-to-end generation: discover sources, scan, parse, resolve, assemble.

Files are scanned in sorted path order, so ``discovery_index`` is a total
order over (path, offset) regardless of how the caller lists the files.
A malformed block stops the scan of its own file only. An unreadable file
stops the run.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from jswrap_dts.exceptions import MalformedRecordError, SourceReadError
from jswrap_dts.logging import get_pipeline_logger
from jswrap_dts.typegen.assembler import DEFAULT_INDENT, assemble_document
from jswrap_dts.typegen.locator import iter_blocks
from jswrap_dts.typegen.parser import parse_block
from jswrap_dts.typegen.records import AnnotationRecord
from jswrap_dts.typegen.resolver import Resolution, resolve_owners

logger = get_pipeline_logger(__name__)

DEFAULT_PATTERN = "jswrap*.c"


@dataclass(frozen=True)
class ScanResult:
    """Records from every scanned file plus the per-file failures."""

    records: tuple[AnnotationRecord, ...]
    failures: tuple[MalformedRecordError, ...]


@dataclass(frozen=True)
class GenerationResult:
    """Rendered document and everything needed to report on it."""

    document: str
    records: tuple[AnnotationRecord, ...]
    resolution: Resolution
    failures: tuple[MalformedRecordError, ...]

    @property
    def declared_count(self) -> int:
        """Records carrying at least one declaration."""
        return sum(1 for record in self.records if record.declarations)


def discover_sources(source_dir: Path, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    """Recursively find files under ``source_dir`` whose name matches ``pattern``, sorted."""
    return sorted(path for path in source_dir.rglob(pattern) if path.is_file())


def read_source(path: Path) -> str:
    """Read a whole source file. Raises SourceReadError on any I/O failure."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceReadError(f"cannot read {path}: {exc}") from exc


def scan_file(path: Path, start_index: int = 0) -> tuple[list[AnnotationRecord], MalformedRecordError | None]:
    """Parse every block in one file, numbering records from ``start_index``.

    Returns the records parsed before any malformed block, and that block's error.
    """
    text = read_source(path)
    records: list[AnnotationRecord] = []
    try:
        for block in iter_blocks(text, source=str(path)):
            records.append(parse_block(block, start_index + len(records)))
    except MalformedRecordError as exc:
        logger.warning("%s; remaining blocks in %s skipped", exc, path)
        return records, exc
    return records, None


def collect_records(paths: Iterable[Path]) -> ScanResult:
    """Scan ``paths`` in sorted order and stamp a global discovery index."""
    records: list[AnnotationRecord] = []
    failures: list[MalformedRecordError] = []
    ordered = sorted(set(paths))
    for path in ordered:
        file_records, failure = scan_file(path, len(records))
        records.extend(file_records)
        if failure is not None:
            failures.append(failure)
    logger.info("Parsed %d annotation records from %d files (%d malformed)", len(records), len(ordered), len(failures))
    return ScanResult(records=tuple(records), failures=tuple(failures))


def build_document(records: Iterable[AnnotationRecord], indent: str = DEFAULT_INDENT) -> tuple[str, Resolution]:
    """Resolve owners and assemble the declaration document from parsed records."""
    resolution = resolve_owners(records)
    return assemble_document(resolution, indent), resolution


def generate_document(paths: Iterable[Path], indent: str = DEFAULT_INDENT) -> GenerationResult:
    """Run the full pipeline over ``paths``."""
    scan = collect_records(paths)
    document, resolution = build_document(scan.records, indent)
    if resolution.unresolved:
        logger.warning("%d members dropped for missing owners", len(resolution.unresolved))
    return GenerationResult(document=document, records=scan.records, resolution=resolution, failures=scan.failures)
