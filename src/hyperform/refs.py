# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reference index - field name to declaring controls and render nodes.

The index is filled by the compiler while it walks a control. Each field
name maps to a RefEntry holding, in encounter order, every control that
declared ``name: <field>`` and the render node produced for it.

Lookups collapse single declarations to the bare value; names declared more
than once come back as an ordered list.

Example:
    >>> index = RefIndex()
    >>> index.add('email', control, node)
    >>> index.models('email') is control
    True
    >>> index.models('missing') is index
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, Union

from .node import RenderNode


@dataclass(frozen=True)
class Single:
    """Render handle for a name declared once."""

    node: RenderNode

    @property
    def nodes(self) -> list[RenderNode]:
        return [self.node]


@dataclass(frozen=True)
class Many:
    """Render handles for a name declared more than once, in order."""

    nodes: tuple[RenderNode, ...]


Partials = Union[Single, Many]


def _append_partial(partials: Partials, node: RenderNode) -> Many:
    """Add a node to a handle, promoting Single to Many on second insertion."""
    if isinstance(partials, Single):
        return Many((partials.node, node))
    return Many((*partials.nodes, node))


def _name_key(name: Any) -> tuple[type, Hashable]:
    """Index key for a field name.

    Keyed by type as well as value, so True, 1, 1.0 and '1' stay separate.
    """
    return type(name), name


@dataclass
class RefEntry:
    """Index record for one field name.

    Attributes:
        name: The field name as declared.
        models: Controls that declared the name, in encounter order.
        partials: ``Single`` or ``Many`` render handle(s) for those controls.
    """

    name: Any
    models: list[Any]
    partials: Partials

    @property
    def nodes(self) -> list[RenderNode]:
        """All render nodes for this name as a list."""
        return list(self.partials.nodes)

    def add(self, control: Any, node: RenderNode) -> None:
        """Record another declaration of the same name."""
        self.models.append(control)
        self.partials = _append_partial(self.partials, node)


def _collapse(items: list[Any]) -> Any:
    if len(items) == 1:
        return items[0]
    return list(items)


@dataclass
class RefIndex:
    """Mapping from field name to RefEntry, built during one compilation."""

    entries: dict[tuple[type, Hashable], RefEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return _name_key(name) in self.entries

    def __iter__(self) -> Iterator[Any]:
        """Iterate over field names in first-declaration order."""
        return iter(self.names())

    def names(self) -> list[Any]:
        """Return field names in first-declaration order."""
        return [entry.name for entry in self.entries.values()]

    def get(self, name: Any, default: Any = None) -> RefEntry | None:
        """Return the RefEntry for name, or default."""
        return self.entries.get(_name_key(name), default)

    def add(self, name: Any, control: Any, node: RenderNode) -> RefEntry:
        """Record that control declared name and was rendered as node.

        The first declaration creates the entry; later ones accumulate.
        """
        entry = self.get(name)
        if entry is None:
            entry = RefEntry(name=name, models=[control], partials=Single(node))
            self.entries[_name_key(name)] = entry
        else:
            entry.add(control, node)
        return entry

    def models(self, name: Any) -> Any:
        """Return the control(s) that declared name.

        Returns:
            The single control if name was declared once, the ordered list of
            controls if declared more than once, or this index itself if the
            name is unknown.
        """
        entry = self.get(name)
        if entry is None:
            return self
        return _collapse(entry.models)

    def partials(self, name: Any) -> Any:
        """Return the render node(s) produced for name.

        Same cardinality rule as models(): one node, an ordered list, or this
        index itself for an unknown name.
        """
        entry = self.get(name)
        if entry is None:
            return self
        return _collapse(entry.nodes)
