"""Annotation block scanning.

A block opens with the ``/*JSON`` sentinel and closes at the first ``*/``
after it. The scanner is a two-state machine; reaching end of text while
inside a block is a terminal error, never an implicit truncation.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from jswrap_dts.exceptions import UnterminatedBlockError

SENTINEL = "/*JSON"
TERMINATOR = "*/"


class ScanState(Enum):
    SEEKING_START = "seeking-start"
    IN_BLOCK = "in-block"


@dataclass(frozen=True)
class RawBlock:
    """Raw annotation block text with its position in the source."""

    source: str
    offset: int  # character offset of the sentinel
    line: int  # 1-based line of the sentinel
    body: str  # text between sentinel and terminator


def iter_blocks(
    text: str,
    source: str = "<string>",
    sentinel: str = SENTINEL,
    terminator: str = TERMINATOR,
) -> Iterator[RawBlock]:
    """Lazily yield every annotation block in ``text``.

    Each call starts a fresh scan. Raises UnterminatedBlockError when a
    sentinel has no terminator; blocks before it have already been yielded.
    """
    state = ScanState.SEEKING_START
    cursor = 0
    start = 0
    # 1-based line number at offset ``counted``
    line = 1
    counted = 0
    while True:
        if state is ScanState.SEEKING_START:
            start = text.find(sentinel, cursor)
            if start < 0:
                return
            cursor = start + len(sentinel)
            state = ScanState.IN_BLOCK
        else:
            end = text.find(terminator, cursor)
            if end < 0:
                raise UnterminatedBlockError(source, start, f"{sentinel} block has no closing {terminator}")
            line += text.count("\n", counted, start)
            counted = start
            yield RawBlock(source=source, offset=start, line=line, body=text[cursor:end])
            cursor = end + len(terminator)
            state = ScanState.SEEKING_START
