#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Exceptions raised while converting a notebook export.

Every HighlightHopError carries a message that is safe to show to the
person who sent the export. Anything else is an unexpected failure.
"""

from typing import Optional


class HighlightHopError(Exception):
    """Base class for user-facing conversion errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotebookParseError(HighlightHopError):
    """The notebook export could not be parsed."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        # Character offset into the source markup, when known
        self.offset = offset

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, offset={self.offset!r})"


class StructuralError(NotebookParseError):
    """A required element of the export is missing."""


class GrammarError(NotebookParseError):
    """A note heading does not start with a recognized kind keyword."""


class SequencingError(NotebookParseError):
    """Headings and text blocks are not paired up."""


class FormatError(HighlightHopError):
    """The requested output format is not supported."""

    def __init__(self, format_name: str):
        super().__init__(f"Unsupported format: {format_name}")
        self.format_name = format_name


class MissingAttachmentError(HighlightHopError):

    def __init__(self):
        super().__init__(
            "The email doesn't contain any attachments. Please make sure to "
            "attach a Kindle notebook export to your email."
        )


class UnsupportedAttachmentError(HighlightHopError):

    def __init__(self):
        super().__init__(
            "The attachment is not a valid Kindle notebook export. Please make "
            "sure to attach a valid Kindle notebook export to your email."
        )


class MissingFormatError(HighlightHopError):

    def __init__(self):
        super().__init__("Format header not found in the email.")


class ConfigurationError(Exception):
    """Required configuration is missing from the environment."""


class ReplyAfterFailure(Exception):
    """
    An unexpected error stopped the conversion of an email.

    Carries the failure reply composed for the sender; the original
    exception is chained as __cause__.
    """

    def __init__(self, reply):
        super().__init__("An unexpected error occurred while processing the email.")
        self.reply = reply
