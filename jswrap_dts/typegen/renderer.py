"""Record to declaration text rendering.

Output is indent-agnostic; the assembler indents member blocks.
"""

from jswrap_dts.typegen.records import PARAGRAPH_SEPARATOR, AnnotationRecord

COMMENT_OPEN = "/**"
COMMENT_CLOSE = " */"


def _comment_line(text: str) -> str:
    return f" * {text}".rstrip()


def _tagged_lines(tag: str, text: str) -> list[str]:
    first, *rest = text.split(PARAGRAPH_SEPARATOR)
    return [_comment_line(f"{tag} {first}"), *(_comment_line(line) for line in rest)]


def render_description_comment(record: AnnotationRecord) -> list[str]:
    """Comment lines built from the description alone (used for owner headers)."""
    if not record.description:
        return []
    return [COMMENT_OPEN, *(_comment_line(line) for line in record.description.split(PARAGRAPH_SEPARATOR)), COMMENT_CLOSE]


def render_doc_comment(record: AnnotationRecord) -> list[str]:
    """Full doc comment lines: description, one ``@param`` per param, ``@returns``.

    Empty when the record documents nothing, so the signature renders bare.
    """
    if not record.has_documentation:
        return []
    body: list[str] = []
    if record.description:
        body.extend(_comment_line(line) for line in record.description.split(PARAGRAPH_SEPARATOR))
    for param in record.params:
        body.extend(_tagged_lines(f"@param {param.name}", param.text))
    if record.return_info is not None:
        body.extend(_tagged_lines("@returns", record.return_info.text))
    return [COMMENT_OPEN, *body, COMMENT_CLOSE]


def render_declaration(record: AnnotationRecord) -> str:
    """Render every signature of ``record``, each preceded by its own copy of the doc comment."""
    comment = render_doc_comment(record)
    lines: list[str] = []
    for signature in record.declarations:
        lines.extend(comment)
        lines.append(signature)
    return "\n".join(lines)
