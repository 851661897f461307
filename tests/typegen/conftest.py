import json

import pytest

from jswrap_dts.typegen.locator import RawBlock
from jswrap_dts.typegen.parser import parse_block


@pytest.fixture
def make_record():
    """Build a record the way the pipeline does: JSON block body through the parser.

    ``cls`` stands in for the ``class`` key.
    """

    def _make(index: int, **fields):
        if "cls" in fields:
            fields["class"] = fields.pop("cls")
        body = json.dumps(fields)
        return parse_block(RawBlock(source="test.c", offset=index * 100, line=index + 1, body=body), index)

    return _make
