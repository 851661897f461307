import pytest

from jswrap_dts.exceptions import MalformedRecordError, UnterminatedBlockError
from jswrap_dts.typegen.locator import RawBlock, iter_blocks

SOURCE = """#include "jswrap_widget.h"

/*JSON{
  "type" : "class",
  "class" : "Widget"
}
*/

int x; /* ordinary comment */

/*JSON{
  "type" : "method",
  "class" : "Widget",
  "name" : "spin"
}
Spin it
*/
void jswrap_widget_spin() {}
"""


def test_yields_blocks_in_source_order():
    blocks = list(iter_blocks(SOURCE, source="jswrap_widget.c"))
    assert len(blocks) == 2
    assert '"class" : "Widget"' in blocks[0].body
    assert '"name" : "spin"' in blocks[1].body
    assert blocks[0].offset < blocks[1].offset
    assert all(b.source == "jswrap_widget.c" for b in blocks)


def test_body_excludes_sentinel_and_terminator():
    block = next(iter_blocks("/*JSON{ \"type\": \"class\" }*/"))
    assert block.body == '{ "type": "class" }'


def test_reports_offset_and_line():
    blocks = list(iter_blocks(SOURCE))
    assert blocks[0].offset == SOURCE.index("/*JSON")
    assert blocks[0].line == 3
    assert blocks[1].line == 11


def test_line_numbers_across_shared_and_multiline_blocks():
    text = "/*JSON{}*/ /*JSON{}*/\n\n/*JSON{\n}*/\n/*JSON{}*/"
    blocks = list(iter_blocks(text))
    assert [b.line for b in blocks] == [1, 1, 3, 5]
    assert [b.line for b in blocks] == [text.count("\n", 0, b.offset) + 1 for b in blocks]


def test_ordinary_comments_are_ignored():
    assert list(iter_blocks("/* plain */ int y; // nothing\n")) == []


def test_empty_text():
    assert list(iter_blocks("")) == []


def test_unterminated_block_raises_after_earlier_blocks():
    text = '/*JSON{"type": "class"}*/\n/*JSON{"type": "method"\n'
    scanner = iter_blocks(text, source="broken.c")
    first = next(scanner)
    assert first.body == '{"type": "class"}'
    with pytest.raises(UnterminatedBlockError) as excinfo:
        next(scanner)
    assert excinfo.value.source == "broken.c"
    assert excinfo.value.offset == text.index("/*JSON", 1)


def test_unterminated_block_is_malformed_record():
    with pytest.raises(MalformedRecordError):
        list(iter_blocks("/*JSON{"))


def test_scan_is_restartable():
    assert list(iter_blocks(SOURCE)) == list(iter_blocks(SOURCE))


def test_blocks_do_not_nest():
    text = '/*JSON{"a": 1} /*JSON{"b": 2} */ tail */'
    blocks = list(iter_blocks(text))
    assert blocks == [RawBlock(source="<string>", offset=0, line=1, body='{"a": 1} /*JSON{"b": 2} ')]
