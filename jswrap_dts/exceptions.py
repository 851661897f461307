"""Exception hierarchy for jswrap-dts.

All exceptions inherit from TypegenError, providing a consistent error handling interface.
"""


class TypegenError(Exception):
    """Base exception for all jswrap-dts errors."""


class SourceReadError(TypegenError):
    """Raised when a source file cannot be read. Aborts the whole run."""


class MalformedRecordError(TypegenError):
    """Raised when an annotation block cannot be coerced into a key/value record."""

    def __init__(self, source: str, offset: int, reason: str) -> None:
        self.source = source
        self.offset = offset
        self.reason = reason
        super().__init__(f"{source}:{offset}: {reason}")


class UnterminatedBlockError(MalformedRecordError):
    """Raised when an annotation sentinel has no terminator before end of file."""


class MissingFieldError(TypegenError):
    """Raised when a synthetic declaration needs a field the block does not declare."""
