#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Convert a notebook to CSV, one row per marker.
"""

from typing import List

from ..models import Highlight, Marker, Note, Notebook
from .format_utils import stringify_csv

CSV_COLUMNS = [
    'Type',
    'Location',
    'Page',
    'Section',
    'Chapter',
    'Quote',
    'Color',
    'Note',
]


class CsvConverter:
    """Serialize a notebook as comma separated values."""

    name = 'csv'
    content_type = 'text/csv'
    extension = 'csv'

    def format(self, notebook: Notebook) -> str:
        """Header row plus one row per marker, no trailing newline."""
        rows = [','.join(CSV_COLUMNS)]
        for marker in notebook.markers:
            rows.append(','.join(self._marker_row(marker)))
        return '\n'.join(rows)

    def _marker_row(self, marker: Marker) -> List[str]:
        if isinstance(marker, Highlight):
            quote = stringify_csv(marker.quote)
            color = stringify_csv(marker.color)
        elif isinstance(marker, Note):
            quote = ''
            color = ''
        else:
            raise TypeError(f"Unknown marker: {marker!r}")

        return [
            marker.type,
            stringify_csv(marker.location),
            stringify_csv(marker.page),
            stringify_csv(marker.section),
            stringify_csv(marker.chapter),
            quote,
            color,
            stringify_csv(marker.note),
        ]
