#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
HighlightHop - Convert Kindle notebook exports to CSV, Markdown or JSON.

This package parses the HTML file produced by Kindle's "Export Notebook"
feature into a Notebook of highlights and notes, and serializes it into
one of the supported output formats.

Modules:
    - extractors: Markup traversal, heading grammar, notebook parsing, merging
    - converters: CSV, Markdown and JSON serializers
    - models: Notebook, Highlight, Note and FormattedNotebook
    - errors: Exception hierarchy
    - pipeline: parse_notebook / format_notebook / convert_file
    - pipeline_base: Logging and configuration helpers
    - mail: Inbound email handling and reply composition
"""

from .errors import FormatError, HighlightHopError, NotebookParseError
from .models import FormattedNotebook, Highlight, Note, Notebook
from .pipeline import SUPPORTED_FORMATS, convert_file, format_notebook, parse_notebook

__version__ = "1.0.0"
__author__ = "Denis Darkin"
__license__ = "MIT"

__all__ = [
    "parse_notebook",
    "format_notebook",
    "convert_file",
    "SUPPORTED_FORMATS",
    "Notebook",
    "Highlight",
    "Note",
    "FormattedNotebook",
    "HighlightHopError",
    "NotebookParseError",
    "FormatError",
]
