# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FormCompiler - compile a control into a render tree and reference index.

The compiler walks a control once. Nested controls keyed by a form element
name (``fieldset``, ``input``, ...) become tagged elements; other nested
controls become anonymous groups whose children splice into their parent.
Scalar entries become attributes, except for two reserved keys:

- ``_text``: emitted as a text child
- ``_label``: discarded

Every ``name`` entry is also recorded in the reference index, so the
declaring control and its rendered element can be looked up by field name.

Example:
    >>> form = FormCompiler({'fieldset': {'input': {'name': 'email', 'type': 'text'}}})
    >>> form.partials('email').attr
    {'name': 'email', 'type': 'text'}
    >>> form.models('email')
    {'name': 'email', 'type': 'text'}
    >>> form.models('missing') is form
    True
"""

from __future__ import annotations

import logging
from typing import Any

from .control import Nested, Scalar, iter_classified
from .exceptions import CyclicControlGraph, InvalidControlShape
from .node import ElementNode, GroupNode, RenderNode, TextNode
from .refs import RefIndex

logger = logging.getLogger(__name__)

FORM_ELEMENTS: frozenset[str] = frozenset({
    "fieldset",
    "legend",
    "input",
    "textarea",
    "select",
    "optgroup",
    "option",
    "button",
    "datalist",
    "keygen",
    "output",
})

TEXT_KEY = "_text"
LABEL_KEY = "_label"
NAME_KEY = "name"


class _Traversal:
    """One compilation pass: walks a control and fills a RefIndex."""

    def __init__(self, tags: frozenset[str], refs: RefIndex) -> None:
        self.tags = tags
        self.refs = refs
        self._active: set[int] = set()

    def traverse(self, node: Any, tag: str | None = None) -> RenderNode:
        """Compile node into an ElementNode (if tag) or a GroupNode."""
        node_id = id(node)
        if node_id in self._active:
            raise CyclicControlGraph(
                f"control {type(node).__name__} at {node_id:#x} contains itself"
            )
        self._active.add(node_id)
        try:
            return self._compile_entries(node, tag)
        finally:
            self._active.discard(node_id)

    def _compile_entries(self, node: Any, tag: str | None) -> RenderNode:
        container: ElementNode | GroupNode = ElementNode(tag) if tag else GroupNode()

        for key, entry in iter_classified(node):
            if isinstance(entry, Nested):
                if key == NAME_KEY:
                    raise InvalidControlShape(
                        f"'{NAME_KEY}' must be a scalar, not a nested control"
                    )
                if key in self.tags:
                    container.append(self.traverse(entry.control, key))
                else:
                    container.append(self.traverse(entry.control))
            elif isinstance(entry, Scalar):
                value = entry.value
                if key == TEXT_KEY:
                    container.append(TextNode(value))
                elif key == LABEL_KEY:
                    continue
                else:
                    if key == NAME_KEY:
                        self.refs.add(value, node, container)
                        logger.debug("Indexed field %r on %r", value, container)
                    container.set_attr({key: value})

        return container


def traverse(
    node: Any,
    tag: str | None = None,
    *,
    refs: RefIndex,
    tags: frozenset[str] = FORM_ELEMENTS,
) -> RenderNode:
    """Compile node into an ElementNode (if tag) or an anonymous GroupNode.

    Field names found along the way are recorded into refs.
    """
    return _Traversal(frozenset(tags), refs).traverse(node, tag)


def compile(
    control: Any,
    root_tag: str = "form",
    tags: frozenset[str] = FORM_ELEMENTS,
) -> tuple[RenderNode, RefIndex]:
    """Compile a control into ``(root, index)``.

    Args:
        control: The root control. It is always rendered as ``root_tag``.
        root_tag: Tag of the implicit root element.
        tags: Keys whose nested controls become tagged elements.

    Returns:
        Tuple of the root ElementNode and the RefIndex built alongside it.

    Raises:
        InvalidControlShape: If the control or one of its entries is malformed.
        CyclicControlGraph: If a control contains itself.
    """
    refs = RefIndex()
    logger.debug("Compiling control as <%s>", root_tag)
    root = traverse(control, root_tag, refs=refs, tags=tags)
    logger.debug("Compiled <%s>: %d field name(s) indexed", root_tag, len(refs))
    return root, refs


class FormCompiler:
    """A compiled form: the control, its render tree and reference index.

    Usage:
        >>> form = FormCompiler(control)
        >>> form.tree              # root ElementNode ('form')
        >>> form.models('color')   # control(s) declaring name='color'
        >>> form.partials('color') # render node(s) for those controls

    Attributes:
        control: The last compiled control, or None.
        tree: Root of the compiled render tree, or None before compilation.
        refs: The RefIndex of the last compilation.
    """

    def __init__(
        self,
        control: Any = None,
        root_tag: str = "form",
        tags: frozenset[str] | None = None,
    ) -> None:
        """Initialize, compiling control right away when given.

        Args:
            control: Optional root control.
            root_tag: Tag of the implicit root element (default 'form').
            tags: Keys rendered as tagged elements (default FORM_ELEMENTS).
        """
        self.root_tag = root_tag
        self.tags = frozenset(tags) if tags is not None else FORM_ELEMENTS
        self.control: Any = None
        self.tree: RenderNode | None = None
        self.refs = RefIndex()

        if control is not None:
            self.compile(control)

    def __repr__(self) -> str:
        return f"FormCompiler(root_tag={self.root_tag!r}, names={self.refs.names()!r})"

    def compile(self, control: Any) -> tuple[RenderNode, RefIndex]:
        """Compile control, replacing the current tree and index.

        State is only replaced once the compilation succeeds.
        """
        tree, refs = compile(control, root_tag=self.root_tag, tags=self.tags)
        self.control = control
        self.tree = tree
        self.refs = refs
        return tree, refs

    def models(self, name: Any) -> Any:
        """Return the control(s) declaring name, or self if unknown."""
        result = self.refs.models(name)
        if result is self.refs:
            return self
        return result

    def partials(self, name: Any) -> Any:
        """Return the render node(s) for name, or self if unknown."""
        result = self.refs.partials(name)
        if result is self.refs:
            return self
        return result

    def to_html(self, indent: int | None = None) -> str:
        """Render the compiled tree as HTML (empty string before compiling)."""
        from .render import to_html

        if self.tree is None:
            return ""
        return to_html(self.tree, indent=indent)
