"""jswrap-dts - TypeScript ambient declarations from native API annotations.

Native wrapper sources document the scripting API they expose in
``/*JSON{ ... }*/`` comment blocks. This package turns those blocks into a
single ``.d.ts`` file for editors and type checkers.

Quick Start:
    >>> from pathlib import Path
    >>> from jswrap_dts import discover_sources, generate_document
    >>>
    >>> result = generate_document(discover_sources(Path("src")))
    >>> Path("types.d.ts").write_text(result.document)

Environment Variables:
    - JSWRAP_DTS_SOURCE_DIR, JSWRAP_DTS_FILE_PATTERN, JSWRAP_DTS_OUTPUT_PATH, JSWRAP_DTS_INDENT
    - JSWRAP_DTS_LOGGING_CONFIG, JSWRAP_DTS_LOG_LEVEL
"""

from .exceptions import (
    MalformedRecordError,
    MissingFieldError,
    SourceReadError,
    TypegenError,
    UnterminatedBlockError,
)
from .logging import get_pipeline_logger, setup_logging
from .settings import Settings, settings
from .typegen import (
    GenerationResult,
    RecordKind,
    Resolution,
    UnresolvedOwner,
    discover_sources,
    generate_document,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "MalformedRecordError",
    "MissingFieldError",
    "RecordKind",
    "Resolution",
    "Settings",
    "SourceReadError",
    "TypegenError",
    "UnresolvedOwner",
    "UnterminatedBlockError",
    "discover_sources",
    "generate_document",
    "get_pipeline_logger",
    "setup_logging",
    "settings",
]
