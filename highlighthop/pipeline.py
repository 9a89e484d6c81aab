#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Notebook conversion pipeline: parse an export, merge markers, serialize.
"""

import logging
from pathlib import Path

from .converters import CsvConverter, JsonConverter, MarkdownConverter
from .converters.format_utils import title_slug
from .errors import FormatError
from .extractors import extract_notebook, merge_markers
from .models import FormattedNotebook, Notebook

logger = logging.getLogger(__name__)

CONVERTERS = {
    converter.name: converter
    for converter in (CsvConverter(), MarkdownConverter(), JsonConverter())
}

SUPPORTED_FORMATS = tuple(CONVERTERS)


def parse_notebook(source: str) -> Notebook:
    """
    Parse a Kindle notebook export.

    Args:
        source: HTML text of the export

    Returns:
        Notebook with notes merged into their highlights

    Raises:
        NotebookParseError: If the export doesn't have the expected shape
    """
    raw = extract_notebook(source)
    markers = merge_markers(raw.markers)
    logger.debug(f"Merged {len(raw.markers)} raw marker(s) into {len(markers)}")
    return Notebook(title=raw.title, authors=raw.authors, markers=tuple(markers))


def format_notebook(notebook: Notebook, format: str) -> FormattedNotebook:
    """
    Serialize a notebook.

    Args:
        notebook: Parsed notebook
        format: One of SUPPORTED_FORMATS

    Returns:
        Content, filename and MIME type of the output document

    Raises:
        FormatError: If format is not supported
    """
    converter = CONVERTERS.get(format) if isinstance(format, str) else None
    if converter is None:
        raise FormatError(format)

    return FormattedNotebook(
        content=converter.format(notebook),
        filename=f"{title_slug(notebook)}.{converter.extension}",
        content_type=converter.content_type,
    )


def convert_file(input_path: Path, output_dir: Path, format: str) -> Path:
    """
    Convert an export file and write the result into output_dir.

    Returns:
        Path of the written file
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)

    logger.info(f"Parsing: {input_path.name}")
    with open(input_path, 'r', encoding='utf-8') as f:
        notebook = parse_notebook(f.read())

    logger.info(f"  - Title: {notebook.title or 'Unknown Title'}")
    logger.info(f"  - Markers: {len(notebook.markers)}")

    formatted = format_notebook(notebook, format)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / formatted.filename
    with open(output_file, 'w', encoding='utf-8', newline='') as f:
        f.write(formatted.content)

    logger.info(f"Saved {format} output to: {output_file}")
    return output_file
