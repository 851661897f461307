"""Permissive parsing of annotation block bodies into typed records.

A body is a JSON object literal, possibly a fragment of one, optionally
followed by free text that documents the element. The object is repaired
(opening brace, line comments, trailing commas, unclosed containers) before
it is decoded. A known field whose value has the wrong shape is set aside
in ``extra`` instead of failing the block. Synthetic declarations for owners,
events and objects are derived here.
"""

import json
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from jswrap_dts.exceptions import MalformedRecordError, MissingFieldError
from jswrap_dts.logging import get_pipeline_logger
from jswrap_dts.typegen.locator import RawBlock
from jswrap_dts.typegen.records import (
    OWNER_KINDS,
    PARAGRAPH_SEPARATOR,
    RECORD_ADAPTER,
    AnnotationRecord,
    EventRecord,
    ObjectRecord,
    Origin,
    OwnerRecord,
    RecordKind,
)
from jswrap_dts.typegen.typemap import display_type

logger = get_pipeline_logger(__name__)

_DECODER = json.JSONDecoder(strict=False)
_CLOSERS = {"{": "}", "[": "]"}
_KNOWN_KINDS: dict[str, RecordKind] = {kind.value: kind for kind in RecordKind if kind is not RecordKind.OTHER}
_STATIC_VARIANTS = {
    RecordKind.PROPERTY: RecordKind.STATICPROPERTY,
    RecordKind.METHOD: RecordKind.STATICMETHOD,
}
# Record field -> block key it is read from. Owners read ``name`` from ``class``.
_FIELD_KEYS = {
    "name": "name",
    "owner_name": "class",
    "description": "description",
    "params": "params",
    "return_info": "return",
    "declarations": "typedef",
    "instanceof": "instanceof",
}
_CONSUMED_KEYS = frozenset({"type", "class", "name", "description", "params", "return", "typedef", "static"})


def split_body(body: str) -> tuple[str, str]:
    """Split a block body into repaired JSON object text and the trailing free text."""
    text = body.strip()
    if not text.startswith("{"):
        text = "{" + text

    out: list[str] = []
    stack: list[str] = []
    in_string = False
    escaped = False
    i = 0
    while i < len(text):
        ch = text[i]
        i += 1
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == "/" and text.startswith("/", i):
            newline = text.find("\n", i)
            i = len(text) if newline < 0 else newline
            continue
        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            stack.append(_CLOSERS[ch])
        elif ch in "}]":
            _drop_trailing_comma(out)
            stack.pop()
        out.append(ch)
        if not stack:
            return "".join(out), text[i:]

    # Body ended inside the object: close whatever is still open.
    _drop_trailing_comma(out)
    out.extend(reversed(stack))
    return "".join(out), ""


def _drop_trailing_comma(out: list[str]) -> None:
    j = len(out) - 1
    while j >= 0 and out[j].isspace():
        j -= 1
    if j >= 0 and out[j] == ",":
        del out[j]


def _trailing_description(text: str) -> str | None:
    stripped = text.strip()
    if not stripped:
        return None
    return PARAGRAPH_SEPARATOR.join(line.rstrip() for line in stripped.splitlines())


def resolve_kind(data: dict[str, Any]) -> RecordKind:
    """Map the declared ``type`` (and ``static`` flag) onto the record taxonomy."""
    raw_type = data.get("type")
    kind = _KNOWN_KINDS.get(raw_type, RecordKind.OTHER) if isinstance(raw_type, str) else RecordKind.OTHER
    if data.get("static") is True:
        kind = _STATIC_VARIANTS.get(kind, kind)
    return kind


def derive_class_declaration(record: OwnerRecord) -> str:
    if not record.name:
        raise MissingFieldError("class record declares no class name")
    return f"class {record.name}"


def derive_library_declaration(record: OwnerRecord) -> str:
    if not record.name:
        raise MissingFieldError("library record declares no library name")
    return f"declare namespace {record.name}"


def derive_event_declaration(record: EventRecord) -> str:
    """Registration signature: ``on(event: '<name>', callback: (<params>) => void): void``."""
    if not record.name:
        raise MissingFieldError("event record declares no name")
    args = ", ".join(f"{param.name}: {display_type(param.type_tag)}" for param in record.params)
    return f"on(event: '{record.name}', callback: ({args}) => void): void"


def derive_object_declaration(record: ObjectRecord) -> str:
    if not record.name:
        raise MissingFieldError("object record declares no name")
    if not record.instanceof:
        raise MissingFieldError(f"object {record.name} declares no instanceof")
    return f"declare var {record.name}: {record.instanceof}"


_DERIVATIONS: dict[RecordKind, Callable[[Any], str]] = {
    RecordKind.CLASS: derive_class_declaration,
    RecordKind.LIBRARY: derive_library_declaration,
    RecordKind.EVENT: derive_event_declaration,
    RecordKind.OBJECT: derive_object_declaration,
}


def _decode(block: RawBlock) -> tuple[dict[str, Any], str]:
    object_text, trailing = split_body(block.body)
    try:
        data = _DECODER.decode(object_text)
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(block.source, block.offset, f"no key/value structure ({exc.msg})") from exc
    return data, trailing


def _block_key(field_name: str, kind: RecordKind) -> str:
    if field_name == "name" and kind in OWNER_KINDS:
        return "class"
    return _FIELD_KEYS[field_name]


def _validate(fields: dict[str, Any], block: RawBlock) -> AnnotationRecord:
    """Validate record fields, setting aside known fields whose value has the wrong shape.

    A rejected value is kept in ``extra`` under its block key and the record
    is validated again without it.
    """
    try:
        return RECORD_ADAPTER.validate_python(fields)
    except ValidationError as exc:
        rejected = {
            loc
            for error in exc.errors()
            for loc in error["loc"][:2]
            if isinstance(loc, str) and loc in _FIELD_KEYS and loc in fields
        }
        if not rejected:
            raise MalformedRecordError(block.source, block.offset, f"invalid record ({exc.error_count()} errors)") from exc

    kept = dict(fields)
    extra = dict(kept["extra"])
    for field_name in sorted(rejected):
        key = _block_key(field_name, kept["kind"])
        extra[key] = kept.pop(field_name)
        logger.warning("%s:%d: %r has an unexpected shape, kept as an extra field", block.source, block.line, key)
    kept["extra"] = extra
    try:
        return RECORD_ADAPTER.validate_python(kept)
    except ValidationError as exc:
        raise MalformedRecordError(block.source, block.offset, f"invalid record ({exc.error_count()} errors)") from exc


def parse_block(block: RawBlock, discovery_index: int) -> AnnotationRecord:
    """Parse one raw block into a typed record.

    Args:
        block: Block located in a source file.
        discovery_index: Position of the block in the global (file, offset) scan order.

    Returns:
        The record, with a synthetic declaration attached when its kind derives one
        and the block declares no explicit ``typedef``.

    Raises:
        MalformedRecordError: The body has no recoverable key/value shape.
    """
    data, trailing = _decode(block)
    kind = resolve_kind(data)

    extra = {key: value for key, value in data.items() if key not in _CONSUMED_KEYS}
    fields: dict[str, Any] = {
        "kind": kind,
        "origin": Origin(source=block.source, offset=block.offset, line=block.line),
        "discovery_index": discovery_index,
        "description": data.get("description", _trailing_description(trailing)),
        "params": data.get("params") or (),
        "return_info": data.get("return"),
        "declarations": data.get("typedef") or (),
    }
    if kind in OWNER_KINDS:
        fields["name"] = data.get("class")
    else:
        fields["name"] = data.get("name")
        fields["owner_name"] = data.get("class")
    if kind is RecordKind.OBJECT:
        fields["instanceof"] = extra.pop("instanceof", None)
    if kind is RecordKind.OTHER and isinstance(data.get("type"), str):
        fields["raw_type"] = data["type"]
    fields["extra"] = extra

    record = _validate(fields, block)

    derive = _DERIVATIONS.get(record.kind)
    if record.declarations or derive is None:
        return record
    try:
        declaration = derive(record)
    except MissingFieldError as exc:
        logger.warning("%s:%d: %s, record is not rendered", block.source, block.line, exc)
        return record
    return record.model_copy(update={"declarations": (declaration,)})
