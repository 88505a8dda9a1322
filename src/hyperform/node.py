# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Render node classes produced by the form compiler."""

from __future__ import annotations

from typing import Any, Iterator


class RenderNode:
    """Base class for compiled render nodes.

    There are three kinds of node:
    - ElementNode: a tagged element with attributes and children
    - GroupNode: an anonymous group whose children splice into its parent
    - TextNode: literal text, no attributes and no children
    """

    __slots__ = ()

    tag: str | None = None

    @property
    def is_text(self) -> bool:
        """True if this node holds literal text."""
        return False

    @property
    def is_group(self) -> bool:
        """True if this node is an anonymous group."""
        return False

    def as_dict(self) -> dict[str, Any]:
        """Return a plain, recursive representation of this node."""
        raise NotImplementedError

    def walk(self, _prefix: str = "") -> Iterator[tuple[str, RenderNode]]:
        """Yield ``(path, node)`` pairs depth-first, starting with this node.

        Path segments are ``tag_N`` for elements, ``group_N`` for anonymous
        groups and ``text_N`` for text, numbered per kind among siblings.

        Example:
            >>> for path, node in tree.walk():
            ...     print(path)
            form
            form.fieldset_0
            form.fieldset_0.input_0
        """
        path = _prefix or self._segment_name()
        yield path, self
        counters: dict[str, int] = {}
        for child in getattr(self, "children", ()):
            base = child._segment_name()
            n = counters.get(base, 0)
            counters[base] = n + 1
            yield from child.walk(f"{path}.{base}_{n}")

    def _segment_name(self) -> str:
        raise NotImplementedError


class _ContainerNode(RenderNode):
    """Shared behaviour of nodes that hold attributes and children."""

    __slots__ = ("attr", "children")

    def __init__(
        self,
        attr: dict[str, Any] | None = None,
        children: list[RenderNode] | None = None,
    ) -> None:
        self.attr: dict[str, Any] = attr or {}
        self.children: list[RenderNode] = children if children is not None else []

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[RenderNode]:
        """Iterate over direct children in insertion order."""
        return iter(self.children)

    def __getitem__(self, index: int) -> RenderNode:
        return self.children[index]

    def append(self, child: RenderNode) -> RenderNode:
        """Append a child and return it."""
        self.children.append(child)
        return child

    def get_attr(self, attr: str | None = None, default: Any = None) -> Any:
        """Get attribute value or all attributes.

        Args:
            attr: Attribute name. If None, returns all attributes.
            default: Default value if attribute not found.
        """
        if attr is None:
            return self.attr
        return self.attr.get(attr, default)

    def set_attr(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Set attributes on the node.

        Args:
            _attr: Dictionary of attributes to set.
            **kwargs: Additional attributes as keyword arguments.
        """
        if _attr:
            self.attr.update(_attr)
        self.attr.update(kwargs)

    def as_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "attr": dict(self.attr),
            "children": [child.as_dict() for child in self.children],
        }


class ElementNode(_ContainerNode):
    """A tagged element.

    Example:
        >>> node = ElementNode('input', {'name': 'email'})
        >>> node.tag
        'input'
        >>> node.get_attr('name')
        'email'
    """

    __slots__ = ("tag",)

    def __init__(
        self,
        tag: str,
        attr: dict[str, Any] | None = None,
        children: list[RenderNode] | None = None,
    ) -> None:
        """Initialize an ElementNode.

        Args:
            tag: The element's tag name.
            attr: Optional dictionary of attributes.
            children: Optional initial list of children.
        """
        super().__init__(attr, children)
        self.tag = tag

    def __repr__(self) -> str:
        return f"ElementNode({self.tag!r}, attr={self.attr!r}, children={len(self.children)})"

    def _segment_name(self) -> str:
        return self.tag


class GroupNode(_ContainerNode):
    """An anonymous group: no tag, its children splice into the parent.

    Attributes assigned to a group are kept on the node (the compiler may
    record ``name`` and other scalar entries here) but a renderer has no
    element to carry them.
    """

    __slots__ = ()

    def __init__(
        self,
        children: list[RenderNode] | None = None,
        attr: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(attr, children)

    def __repr__(self) -> str:
        return f"GroupNode(children={len(self.children)})"

    @property
    def is_group(self) -> bool:
        return True

    def _segment_name(self) -> str:
        return "group"


class TextNode(RenderNode):
    """Literal text."""

    __slots__ = ("text",)

    def __init__(self, text: Any) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"TextNode({self.text!r})"

    @property
    def is_text(self) -> bool:
        return True

    def as_dict(self) -> dict[str, Any]:
        return {"text": self.text}

    def _segment_name(self) -> str:
        return "text"
