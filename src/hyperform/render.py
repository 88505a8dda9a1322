# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML rendering of compiled form trees.

Anonymous groups have no markup of their own: their children are spliced
into the parent at the group's position.

Example:
    >>> tree, refs = compile({'input': {'name': 'q', 'type': 'search'}})
    >>> to_html(tree)
    '<form><input name="q" type="search"></form>'
"""

from __future__ import annotations

from html import escape
from typing import Any, Iterator

from .node import RenderNode

# Elements rendered without a closing tag
VOID_ELEMENTS: frozenset[str] = frozenset({"input", "keygen"})


def iter_children(node: RenderNode) -> Iterator[RenderNode]:
    """Yield a node's effective children, splicing anonymous groups."""
    for child in getattr(node, "children", ()):
        if child.is_group:
            yield from iter_children(child)
        else:
            yield child


def _format_attrs(attr: dict[str, Any]) -> str:
    """Format attributes; True is a bare attribute, False and None are dropped."""
    parts = []
    for key, value in attr.items():
        if value is True:
            parts.append(escape(key))
        elif value is False or value is None:
            continue
        else:
            parts.append(f'{escape(key)}="{escape(str(value))}"')
    return f" {' '.join(parts)}" if parts else ""


def _node_to_html(node: RenderNode, indent: int | None, level: int) -> list[str]:
    """Recursively convert a node to a list of HTML fragments."""
    spaces = " " * (indent * level) if indent else ""

    if node.is_text:
        # None text renders nothing
        if node.text is None:
            return []
        return [f"{spaces}{escape(str(node.text))}"]

    if node.is_group:
        lines: list[str] = []
        for child in iter_children(node):
            lines.extend(_node_to_html(child, indent, level))
        return lines

    tag = node.tag
    open_tag = f"{spaces}<{tag}{_format_attrs(node.attr)}>"
    if tag in VOID_ELEMENTS:
        return [open_tag]

    children = list(iter_children(node))
    if not children:
        return [f"{open_tag}</{tag}>"]

    if indent is None:
        inner = "".join(
            "".join(_node_to_html(child, None, 0)) for child in children
        )
        return [f"{open_tag}{inner}</{tag}>"]

    lines = [open_tag]
    for child in children:
        lines.extend(_node_to_html(child, indent, level + 1))
    lines.append(f"{spaces}</{tag}>")
    return lines


def to_html(node: RenderNode, indent: int | None = None) -> str:
    """Render a compiled tree as an HTML string.

    Args:
        node: Root of the tree (usually the compiled 'form' element).
        indent: If given, pretty-print one node per line with this many
            spaces per nesting level. If None, render compactly.

    Returns:
        The HTML markup.
    """
    lines = _node_to_html(node, indent, 0)
    if indent is None:
        return "".join(lines)
    return "\n".join(lines)
