#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
HighlightHop - Convert Kindle notebook exports to CSV, Markdown or JSON

Usage:
    python convert_notebook.py INPUT [options]

Examples:
    python convert_notebook.py "Moby Dick - Notebook.html"
    python convert_notebook.py notebook.html --format csv
    python convert_notebook.py notebook.html --output ./notes --format json
    python convert_notebook.py message.eml --email --sender no-reply@example.com

Requirements:
    - Python 3.8+
    - beautifulsoup4, python-dotenv
"""

import sys
import argparse
import logging
from pathlib import Path

from highlighthop.errors import ConfigurationError, HighlightHopError, ReplyAfterFailure
from highlighthop.mail import handle_email
from highlighthop.pipeline import SUPPORTED_FORMATS, convert_file
from highlighthop.pipeline_base import get_reply_sender, load_settings, setup_logging

logger = logging.getLogger('HighlightHop')


def run_conversion(input_path: Path, output_format: str, output_dir: Path) -> bool:
    """Convert a notebook export file.

    Args:
        input_path: HTML export from Kindle
        output_format: One of SUPPORTED_FORMATS
        output_dir: Directory the converted file is written to
    """
    try:
        output_file = convert_file(input_path, output_dir, output_format)
    except HighlightHopError as e:
        logger.error(f"Could not convert {input_path}: {e!r}")
        return False

    print(f"\nConverted notebook saved to:")
    print(f"  {output_file}")
    return True


def run_email(input_path: Path, output_dir: Path, sender: str = None) -> bool:
    """Process a saved inbound email and write the composed reply.

    Args:
        input_path: Raw .eml message carrying the export as an attachment
        output_dir: Directory reply.eml is written to
        sender: From address of the reply; DOMAIN_NAME is used when None
    """
    try:
        sender = sender or get_reply_sender()
    except ConfigurationError as e:
        logger.error(f"{e} Use --sender or set it in .env")
        return False

    with open(input_path, 'rb') as f:
        raw = f.read()

    try:
        reply = handle_email(raw, sender)
    except ReplyAfterFailure as e:
        _write_reply(e.reply, output_dir)
        return False

    _write_reply(reply, output_dir)
    return True


def _write_reply(reply, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    reply_file = output_dir / 'reply.eml'
    with open(reply_file, 'wb') as f:
        f.write(bytes(reply))

    print(f"\nReply to {reply['To']} saved to:")
    print(f"  {reply_file}")
    return reply_file


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="HighlightHop - Convert Kindle notebook exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python convert_notebook.py notebook.html
    python convert_notebook.py notebook.html --format csv
    python convert_notebook.py message.eml --email

About HighlightHop:
    Reads the HTML file produced by Kindle's "Export Notebook" and writes
    your highlights and notes as CSV, Markdown or JSON.
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help='Kindle notebook export (.html), or a raw email (.eml) with --email'
    )

    parser.add_argument(
        '--format',
        choices=list(SUPPORTED_FORMATS),
        default='markdown',
        help='Output format (default: markdown)'
    )

    parser.add_argument(
        '--output',
        type=Path,
        default=Path('./output'),
        help='Output directory (default: ./output)'
    )

    parser.add_argument(
        '--email',
        action='store_true',
        help='Treat INPUT as an email and write the reply message; the format comes from its X-Format header'
    )

    parser.add_argument(
        '--sender',
        help='From address for the reply (default: no-reply@$DOMAIN_NAME)'
    )

    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Log level (default: INFO)'
    )

    parser.add_argument(
        '--log-dir',
        type=Path,
        help='Also write a log file into this directory'
    )

    args = parser.parse_args(argv)

    load_settings()
    setup_logging(args.log_level, args.log_dir)

    if not args.input.exists():
        logger.error(f"File not found: {args.input}")
        return 1

    if args.email:
        success = run_email(args.input, args.output, args.sender)
    else:
        success = run_conversion(args.input, args.format, args.output)

    return 0 if success else 1


if __name__ == '__main__':
    sys.exit(main())
