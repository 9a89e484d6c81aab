#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Normalized notebook model shared by the extractors and converters.

A Notebook holds the book metadata and an ordered tuple of markers.
Markers are either a Highlight or a standalone Note; consumers dispatch
on the concrete class and treat anything else as a programming error.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class HeadingKind(Enum):
    """Kind keyword a note heading starts with."""
    BOOKMARK = 'Bookmark'
    NOTE = 'Note'
    HIGHLIGHT = 'Highlight'


@dataclass(frozen=True)
class SectionHeading:
    """Decoded noteHeading line, e.g. 'Highlight(yellow) - Page 13 · Location 154'."""
    kind: HeadingKind
    color: Optional[str] = None
    chapter: Optional[str] = None
    page: Optional[int] = None
    location: Optional[int] = None


@dataclass(frozen=True)
class Highlight:
    """A highlighted passage, optionally annotated with a note."""
    section: Optional[str]
    chapter: Optional[str]
    page: Optional[int]
    location: Optional[int]
    color: str
    quote: str
    note: Optional[str] = None

    type = 'Highlight'


@dataclass(frozen=True)
class Note:
    """A note written without a highlight."""
    section: Optional[str]
    chapter: Optional[str]
    page: Optional[int]
    location: Optional[int]
    note: str

    type = 'Note'


Marker = Union[Highlight, Note]

MARKER_TYPES = {
    Highlight.type: Highlight,
    Note.type: Note,
}


@dataclass(frozen=True)
class Notebook:
    """Parsed notebook export."""
    title: Optional[str] = None
    authors: Optional[str] = None
    markers: Tuple[Marker, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FormattedNotebook:
    """Serialized notebook ready to be written or attached to a message."""
    content: str
    filename: str
    content_type: str


def marker_to_dict(marker: Marker) -> Dict[str, Any]:
    """
    Convert a marker to a plain dict, tagged with its type.

    Keys follow the field declaration order; unset optional fields are left out.
    """
    if not isinstance(marker, (Highlight, Note)):
        raise TypeError(f"Unknown marker: {marker!r}")

    data: Dict[str, Any] = {'type': marker.type}
    for f in fields(marker):
        value = getattr(marker, f.name)
        if value is not None:
            data[f.name] = value
    return data


def marker_from_dict(data: Dict[str, Any]) -> Marker:
    """Rebuild a marker from the dict produced by marker_to_dict."""
    marker_type = data.get('type')
    if marker_type not in MARKER_TYPES:
        raise ValueError(f"Unknown marker type: {marker_type!r}")

    cls = MARKER_TYPES[marker_type]
    kwargs = {f.name: data.get(f.name) for f in fields(cls)}
    return cls(**kwargs)


def notebook_to_dict(notebook: Notebook) -> Dict[str, Any]:
    """Convert a notebook to a plain dict suitable for JSON serialization."""
    data: Dict[str, Any] = {}
    if notebook.title is not None:
        data['title'] = notebook.title
    if notebook.authors is not None:
        data['authors'] = notebook.authors
    data['markers'] = [marker_to_dict(marker) for marker in notebook.markers]
    return data


def notebook_from_dict(data: Dict[str, Any]) -> Notebook:
    """Rebuild a notebook from the dict produced by notebook_to_dict."""
    return Notebook(
        title=data.get('title'),
        authors=data.get('authors'),
        markers=tuple(marker_from_dict(item) for item in data.get('markers', [])),
    )
