#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Notebook Converters Module.

Provides converters for serializing a parsed Notebook into output
documents.

Available converters:
    - CsvConverter: One row per marker
    - MarkdownConverter: Markdown document grouped by section
    - JsonConverter: Pretty-printed JSON
    - format_utils: Shared slug, HTML and CSV escaping utilities
"""

from .csv_converter import CsvConverter
from .json_converter import JsonConverter
from .markdown_converter import MarkdownConverter

__all__ = [
    "CsvConverter",
    "MarkdownConverter",
    "JsonConverter",
]
