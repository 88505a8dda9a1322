# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hyperform - compile hypermedia controls into editable form trees.

A small, zero-dependency library that turns a nested control description
into a render tree of form elements, indexing every field by name.
"""

__version__ = "0.1.0"

from .compiler import FORM_ELEMENTS, FormCompiler, compile, traverse
from .control import Nested, Scalar, classify, iter_entries
from .exceptions import (
    CyclicControlGraph,
    HyperformError,
    InvalidControlShape,
)
from .node import ElementNode, GroupNode, RenderNode, TextNode
from .refs import Many, RefEntry, RefIndex, Single
from .render import iter_children, to_html

__all__ = [
    # Compiler
    "FormCompiler",
    "compile",
    "traverse",
    "FORM_ELEMENTS",
    # Controls
    "Nested",
    "Scalar",
    "classify",
    "iter_entries",
    # Render nodes
    "RenderNode",
    "ElementNode",
    "GroupNode",
    "TextNode",
    # Reference index
    "RefIndex",
    "RefEntry",
    "Single",
    "Many",
    # Rendering
    "to_html",
    "iter_children",
    # Exceptions
    "HyperformError",
    "InvalidControlShape",
    "CyclicControlGraph",
]
