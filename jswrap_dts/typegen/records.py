"""Typed records parsed from annotation blocks.

Each block becomes one frozen pydantic model. The models form a union
discriminated on ``kind``, so the fields a variant carries are explicit:
owners have a name but no owner, members have both, and so on.
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, TypeAdapter, field_validator, model_validator

PARAGRAPH_SEPARATOR = "\r\n"


class RecordKind(StrEnum):
    """Declared (or inferred) kind of an annotation record."""

    CLASS = "class"
    LIBRARY = "library"
    OBJECT = "object"
    EVENT = "event"
    PROPERTY = "property"
    STATICPROPERTY = "staticproperty"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    STATICMETHOD = "staticmethod"
    OTHER = "other"


OWNER_KINDS: frozenset[RecordKind] = frozenset({RecordKind.CLASS, RecordKind.LIBRARY})


class Origin(BaseModel):
    """Where a block was found: source path, character offset of the sentinel, 1-based line."""

    model_config = ConfigDict(frozen=True)

    source: str
    offset: int
    line: int


class Param(BaseModel):
    """One documented parameter: ``[name, type_tag, text]`` in the block."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_tag: str = ""
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def from_array(cls, value: Any) -> Any:
        if isinstance(value, Sequence) and not isinstance(value, str):
            padded = [*value, "", "", ""][:3]
            return {"name": padded[0], "type_tag": padded[1], "text": _join_text(padded[2])}
        return value


class ReturnInfo(BaseModel):
    """Documented return value: ``[type_tag, text]`` in the block."""

    model_config = ConfigDict(frozen=True)

    type_tag: str = ""
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def from_array(cls, value: Any) -> Any:
        if isinstance(value, Sequence) and not isinstance(value, str):
            padded = [*value, "", ""][:2]
            return {"type_tag": padded[0], "text": _join_text(padded[1])}
        return value


def _join_text(value: Any) -> Any:
    if isinstance(value, list):
        return PARAGRAPH_SEPARATOR.join(str(item) for item in value)
    return value


class _RecordBase(BaseModel):
    """Fields shared by every record variant."""

    model_config = ConfigDict(frozen=True)

    origin: Origin
    discovery_index: int
    description: str | None = None
    params: tuple[Param, ...] = ()
    return_info: ReturnInfo | None = None
    declarations: tuple[str, ...] = ()
    extra: dict[str, Any] = {}

    @field_validator("description", mode="before")
    @classmethod
    def join_description(cls, value: Any) -> Any:
        return _join_text(value)

    @field_validator("declarations", mode="before")
    @classmethod
    def wrap_single_declaration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value

    @property
    def has_documentation(self) -> bool:
        """True when any field feeding the doc comment is present."""
        return bool(self.description) or bool(self.params) or self.return_info is not None

    @property
    def label(self) -> str:
        """Human readable identifier for diagnostics."""
        return getattr(self, "name", None) or f"<{self.kind}>"


class OwnerRecord(_RecordBase):
    """A class or library that member records attach to by name."""

    kind: Literal[RecordKind.CLASS, RecordKind.LIBRARY]
    name: str | None = None


class ObjectRecord(_RecordBase):
    """A global object instance, declared as ``declare var <name>: <instanceof>``."""

    kind: Literal[RecordKind.OBJECT]
    name: str | None = None
    owner_name: str | None = None
    instanceof: str | None = None


class EventRecord(_RecordBase):
    """An event, rendered as an ``on(event, callback)`` registration signature."""

    kind: Literal[RecordKind.EVENT]
    name: str | None = None
    owner_name: str | None = None


class MemberRecord(_RecordBase):
    """A property, constructor or method, static or instance."""

    kind: Literal[
        RecordKind.PROPERTY,
        RecordKind.STATICPROPERTY,
        RecordKind.CONSTRUCTOR,
        RecordKind.METHOD,
        RecordKind.STATICMETHOD,
    ]
    name: str | None = None
    owner_name: str | None = None


class OtherRecord(_RecordBase):
    """Any block whose ``type`` is absent or not part of the known taxonomy."""

    kind: Literal[RecordKind.OTHER]
    raw_type: str | None = None
    name: str | None = None
    owner_name: str | None = None


AnnotationRecord = Annotated[
    OwnerRecord | ObjectRecord | EventRecord | MemberRecord | OtherRecord,
    Discriminator("kind"),
]

NonOwnerRecord = ObjectRecord | EventRecord | MemberRecord | OtherRecord

RECORD_ADAPTER: TypeAdapter[AnnotationRecord] = TypeAdapter(AnnotationRecord)

__all__ = [
    "OWNER_KINDS",
    "PARAGRAPH_SEPARATOR",
    "RECORD_ADAPTER",
    "AnnotationRecord",
    "EventRecord",
    "MemberRecord",
    "NonOwnerRecord",
    "ObjectRecord",
    "Origin",
    "OtherRecord",
    "OwnerRecord",
    "Param",
    "RecordKind",
    "ReturnInfo",
]
