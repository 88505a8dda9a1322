# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Control shapes - classifying and enumerating the compiler's input.

A control is an ordered collection of ``(key, value)`` entries where each
value is either another control or a scalar. The compiler only needs to
enumerate entries in order and to tell the two kinds of value apart, so any
of these shapes is accepted:

- a ``Mapping``: entries in insertion order
- a ``list`` or ``tuple``: entries keyed ``'0'``, ``'1'``, ...
- a model-like object with an ``attributes`` mapping
- a collection-like object with a ``models`` sequence (takes precedence)

Example:
    >>> list(iter_entries({'name': 'email', 'type': 'text'}))
    [('name', 'email'), ('type', 'text')]
    >>> list(iter_entries([{'a': 1}, {'b': 2}]))
    [('0', {'a': 1}), ('1', {'b': 2})]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Union

from .exceptions import InvalidControlShape

SCALAR_TYPES = (str, bool, int, float, type(None))


@dataclass(frozen=True)
class Nested:
    """A value holding a nested control."""

    control: Any


@dataclass(frozen=True)
class Scalar:
    """A value holding a scalar (str, bool, int, float or None)."""

    value: Any


Entry = Union[Nested, Scalar]


def _entries_source(control: Any) -> Mapping | Sequence | None:
    """Return the mapping or sequence that carries a control's entries."""
    if isinstance(control, Mapping):
        return control
    if isinstance(control, Sequence) and not isinstance(control, (str, bytes)):
        return control
    models = getattr(control, "models", None)
    if isinstance(models, Sequence) and not isinstance(models, (str, bytes)):
        return models
    attributes = getattr(control, "attributes", None)
    if isinstance(attributes, Mapping):
        return attributes
    return None


def is_control(value: Any) -> bool:
    """True if value can be enumerated as a nested control."""
    return _entries_source(value) is not None


def classify(value: Any) -> Entry:
    """Wrap a value as ``Nested`` or ``Scalar``.

    Raises:
        InvalidControlShape: If value is neither a control nor a scalar.
    """
    if isinstance(value, SCALAR_TYPES):
        return Scalar(value)
    if is_control(value):
        return Nested(value)
    raise InvalidControlShape(
        f"value must be a control or a scalar, not {type(value).__name__}"
    )


def iter_entries(control: Any) -> Iterator[tuple[str, Any]]:
    """Yield a control's ``(key, value)`` entries in declaration order.

    Raises:
        InvalidControlShape: If control is not an accepted shape or a
            mapping key is not a string.
    """
    source = _entries_source(control)
    if source is None:
        raise InvalidControlShape(
            f"control must be a mapping, a sequence, or expose 'models' or "
            f"'attributes', not {type(control).__name__}"
        )

    if isinstance(source, Mapping):
        for key, value in source.items():
            if not isinstance(key, str):
                raise InvalidControlShape(
                    f"control keys must be strings, not {type(key).__name__} ({key!r})"
                )
            yield key, value
    else:
        for index, value in enumerate(source):
            yield str(index), value


def iter_classified(control: Any) -> Iterator[tuple[str, Entry]]:
    """Yield ``(key, Nested | Scalar)`` pairs in declaration order."""
    for key, value in iter_entries(control):
        yield key, classify(value)
