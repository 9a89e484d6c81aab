#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Convert a notebook to a markdown document
"""

from typing import List, Optional

from ..models import Highlight, Marker, Note, Notebook
from .format_utils import escape_html


class MarkdownConverter:
    """Serialize a notebook as markdown, grouped by section."""

    name = 'markdown'
    content_type = 'text/markdown'
    extension = 'md'

    def format(self, notebook: Notebook) -> str:
        """Build the markdown document.

        Every block (title, byline, section heading, marker heading, quote,
        note, separator) is followed by a blank line.
        """
        title = notebook.title if notebook.title is not None else 'Notebook'
        md_blocks = [f"# {title}"]

        if notebook.authors:
            md_blocks.append(f"By: _{notebook.authors}_")

        current_section: Optional[str] = None

        for marker in notebook.markers:
            # New section heading whenever the section changes
            if marker.section and marker.section != current_section:
                current_section = marker.section
                md_blocks.append(f"## {current_section}")

            md_blocks.extend(self._convert_marker(marker))

        return ''.join(f"{block}\n\n" for block in md_blocks)

    def _convert_marker(self, marker: Marker) -> List[str]:
        """Convert one marker to its markdown blocks."""
        md_blocks = [self._marker_heading(marker)]

        if isinstance(marker, Highlight):
            # Explicit <br> keeps line breaks inside a single blockquote
            md_blocks.append('<br>\n'.join(
                f"> {escape_html(line)}" for line in marker.quote.split('\n')
            ))
        elif not isinstance(marker, Note):
            raise TypeError(f"Unknown marker: {marker!r}")

        if marker.note:
            md_blocks.append(f"**Note:** {escape_html(marker.note)}")

        md_blocks.append('----')
        return md_blocks

    def _marker_heading(self, marker: Marker) -> str:
        heading = f"### {marker.type}"

        location_details = []
        if marker.page:
            location_details.append(f"Page {marker.page}")
        if marker.location:
            location_details.append(f"Location {marker.location}")

        if location_details:
            heading += f" ({', '.join(location_details)})"

        if marker.chapter:
            heading += f" - {marker.chapter}"

        return heading
