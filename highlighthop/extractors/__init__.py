#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Notebook Extractors Module.

Provides the pieces that turn a Kindle "Export Notebook" HTML file into
a normalized Notebook.

Available extractors:
    - markup_tree: Read-only helpers over the parsed markup tree
    - heading_grammar: Decoder for noteHeading lines
    - notebook_parser: Walk the export and collect raw markers
    - marker_merger: Fold standalone notes into preceding highlights
"""

from .heading_grammar import parse_section_heading
from .marker_merger import merge_markers
from .notebook_parser import extract_notebook

__all__ = [
    "extract_notebook",
    "merge_markers",
    "parse_section_heading",
]
