#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Attach standalone notes to the highlight they were written on.

The export lists a note on a highlight as its own heading/text pair right
after the highlight. Merging looks back exactly one marker.
"""

import dataclasses
from typing import Iterable, List

from ..models import Highlight, Marker, Note


def merge_markers(markers: Iterable[Marker]) -> List[Marker]:
    """
    Fold each Note into the directly preceding Highlight when that
    highlight has no note yet.

    Args:
        markers: Raw markers in document order

    Returns:
        Merged markers, order preserved
    """
    merged: List[Marker] = []

    for marker in markers:
        if isinstance(marker, Highlight):
            merged.append(marker)

        elif isinstance(marker, Note):
            previous = merged[-1] if merged else None
            if isinstance(previous, Highlight) and previous.note is None:
                merged[-1] = dataclasses.replace(previous, note=marker.note)
            else:
                merged.append(marker)

        else:
            raise TypeError(f"Unknown marker: {marker!r}")

    return merged
