"""TypeScript declaration generation from native annotation blocks.

Scans sources for ``/*JSON ... */`` blocks, parses each into a typed
record, attaches members to their class or library, orders them and
renders one ambient declaration document.
"""

from jswrap_dts.typegen.assembler import assemble_document, render_owner_block
from jswrap_dts.typegen.locator import RawBlock, iter_blocks
from jswrap_dts.typegen.parser import parse_block
from jswrap_dts.typegen.pipeline import (
    GenerationResult,
    ScanResult,
    build_document,
    collect_records,
    discover_sources,
    generate_document,
)
from jswrap_dts.typegen.records import AnnotationRecord, RecordKind
from jswrap_dts.typegen.renderer import render_declaration, render_doc_comment
from jswrap_dts.typegen.resolver import OwnerGroup, Resolution, UnresolvedOwner, resolve_owners
from jswrap_dts.typegen.taxonomy import sort_key, sort_members

__all__ = [
    "AnnotationRecord",
    "GenerationResult",
    "OwnerGroup",
    "RawBlock",
    "RecordKind",
    "Resolution",
    "ScanResult",
    "UnresolvedOwner",
    "assemble_document",
    "build_document",
    "collect_records",
    "discover_sources",
    "generate_document",
    "iter_blocks",
    "parse_block",
    "render_declaration",
    "render_doc_comment",
    "render_owner_block",
    "resolve_owners",
    "sort_key",
    "sort_members",
]
