# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hyperform exceptions."""

from __future__ import annotations


class HyperformError(Exception):
    """Base exception for form compilation errors."""

    pass


class InvalidControlShape(HyperformError, TypeError):
    """Raised when a control, or one of its entries, has an unusable shape.

    Examples are a ``name`` entry holding a nested control, a mapping key
    that is not a string, or a value that is neither a control nor a scalar.
    """

    pass


class CyclicControlGraph(HyperformError, ValueError):
    """Raised when a control is reached again while it is being traversed."""

    pass
