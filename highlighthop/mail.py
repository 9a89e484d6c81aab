#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Inbound mail handling for notebook conversion.

An export arrives as the HTML attachment of an email whose X-Format header
names the output format (set upstream from the recipient address). The
reply carries the converted file, or a short explanation when the export
could not be converted. Messages are only composed here; delivery belongs
to the transport.
"""

import logging
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser
from typing import Optional

from .errors import (
    FormatError,
    HighlightHopError,
    MissingAttachmentError,
    MissingFormatError,
    ReplyAfterFailure,
    UnsupportedAttachmentError,
)
from .models import FormattedNotebook, Notebook
from .pipeline import SUPPORTED_FORMATS, format_notebook, parse_notebook

logger = logging.getLogger(__name__)

FORMAT_HEADER = 'X-Format'
NOTEBOOK_CONTENT_TYPE = 'text/html'
FAILURE_PREFIX = "Highlight Hop failed to process your email:\n"
UNEXPECTED_FAILURE = "An unexpected error occurred. Please try again later."


def parse_message(raw: bytes) -> EmailMessage:
    """Parse raw RFC 822 bytes into a message."""
    return BytesParser(policy=policy.default).parsebytes(raw)


def get_attached_notebook(message: EmailMessage) -> str:
    """
    Return the text of the HTML attachment.

    Raises:
        MissingAttachmentError: If the message has no attachments
        UnsupportedAttachmentError: If none of the attachments is HTML
    """
    attachments = list(message.iter_attachments())
    if not attachments:
        raise MissingAttachmentError()
    if len(attachments) > 1:
        logger.warning(
            f"Multiple attachments found ({len(attachments)}). "
            "Processing only the first HTML attachment."
        )

    for attachment in attachments:
        if attachment.get_content_type() == NOTEBOOK_CONTENT_TYPE:
            payload = attachment.get_payload(decode=True) or b''
            charset = attachment.get_content_charset() or 'utf-8'
            try:
                return payload.decode(charset, errors='replace')
            except LookupError:
                logger.warning(f"Unknown charset {charset!r} on the attachment, decoding as utf-8")
                return payload.decode('utf-8', errors='replace')

    raise UnsupportedAttachmentError()


def get_requested_format(message: EmailMessage) -> str:
    """
    Read the output format from the X-Format header.

    Raises:
        MissingFormatError: If the header is absent or empty
        FormatError: If the header names an unsupported format
    """
    value = message.get(FORMAT_HEADER)
    if value is None or not str(value).strip():
        raise MissingFormatError()

    format_name = str(value).strip().lower()
    if format_name not in SUPPORTED_FORMATS:
        raise FormatError(format_name)
    return format_name


def build_summary(notebook: Notebook, format_name: str) -> str:
    """Human readable status line for a successful conversion."""
    title = notebook.title if notebook.title is not None else 'Unknown Title'
    return (
        f'Successfully processed your Kindle highlights from "{title}". '
        f'Found {len(notebook.markers)} highlights/notes. '
        f'You can find the converted {format_name} file attached.'
    )


def compose_reply(original: EmailMessage, body: str, sender: str,
                  attachment: Optional[FormattedNotebook] = None) -> EmailMessage:
    """
    Build a reply to original from sender.

    Args:
        original: The inbound message
        body: Plain text body
        sender: From address of the reply
        attachment: Converted notebook to attach, if any

    Returns:
        The composed reply, threaded onto the original message
    """
    reply = EmailMessage()
    reply['From'] = sender
    reply['To'] = original.get('From', '')
    reply['Subject'] = f"Re: {original.get('Subject', '')}"

    message_id = original.get('Message-ID')
    if message_id:
        reply['In-Reply-To'] = message_id
        reply['References'] = message_id

    reply.set_content(body)

    if attachment is not None:
        maintype, subtype = attachment.content_type.split('/', 1)
        params = {'charset': 'utf-8'} if maintype == 'text' else None
        reply.add_attachment(
            attachment.content.encode('utf-8'),
            maintype=maintype,
            subtype=subtype,
            filename=attachment.filename,
            params=params,
        )

    return reply


def handle_email(raw: bytes, sender: str) -> EmailMessage:
    """
    Convert the notebook attached to a raw email and compose the reply.

    Conversion problems the sender can fix (HighlightHopError) produce a
    failure reply naming the problem. Any other exception still gets a
    generic failure reply, raised to the caller inside ReplyAfterFailure.

    Raises:
        ReplyAfterFailure: On an unexpected error; its reply should still be sent
    """
    message = parse_message(raw)
    logger.info(
        f"Processing email from {message.get('From')} with subject: {message.get('Subject')}"
    )

    try:
        format_name = get_requested_format(message)
        notebook = parse_notebook(get_attached_notebook(message))
        formatted = format_notebook(notebook, format_name)
    except HighlightHopError as e:
        logger.error(f"An error occurred while processing the email: {e!r}")
        return compose_reply(message, f"{FAILURE_PREFIX}{e.message}", sender)
    except Exception as e:
        logger.exception("An unexpected error occurred while processing the email")
        reply = compose_reply(message, f"{FAILURE_PREFIX}{UNEXPECTED_FAILURE}", sender)
        raise ReplyAfterFailure(reply) from e

    logger.info(f"Converted {len(notebook.markers)} marker(s) to {formatted.filename}")
    return compose_reply(message, build_summary(notebook, format_name), sender, attachment=formatted)
