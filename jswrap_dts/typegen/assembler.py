"""Final document composition: owner blocks first, then free-standing declarations."""

import textwrap

from jswrap_dts.logging import get_pipeline_logger
from jswrap_dts.typegen.renderer import render_declaration, render_description_comment
from jswrap_dts.typegen.resolver import OwnerGroup, Resolution
from jswrap_dts.typegen.taxonomy import sort_members

logger = get_pipeline_logger(__name__)

DEFAULT_INDENT = "  "


def render_owner_block(group: OwnerGroup, indent: str = DEFAULT_INDENT) -> str:
    """Owner header comment, opener, sorted and indented members, closer."""
    lines = render_description_comment(group.owner)
    lines.append(f"{group.owner.declarations[0]} {{")
    members = [member for member in sort_members(group.members) if member.declarations]
    if members:
        lines.append("\n\n".join(textwrap.indent(render_declaration(member), indent) for member in members))
    lines.append("}")
    return "\n".join(lines)


def _renderable(group: OwnerGroup) -> bool:
    if group.owner.declarations:
        return True
    for member in group.members:
        if member.declarations:
            logger.warning(
                "%s:%d: %r not rendered, owner %r has no declaration",
                member.origin.source,
                member.origin.line,
                member.label,
                group.owner.name,
            )
    return False


def assemble_document(resolution: Resolution, indent: str = DEFAULT_INDENT) -> str:
    """Compose the declaration document.

    Owners keep their discovery order. Members without a declaration are
    documentation-only and are skipped. Blocks are separated by one blank
    line and the document ends with a newline.
    """
    blocks = [render_owner_block(group, indent) for group in resolution.owners.values() if _renderable(group)]
    blocks.extend(render_declaration(record) for record in resolution.free if record.declarations)
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
