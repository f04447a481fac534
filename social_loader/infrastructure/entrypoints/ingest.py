"""
CLI entry point for loading social media URLs.

This script is the Composition Root for command-line runs: it wires the
default adapters into a SocialIngestService and prints the resulting
documents as a JSON array on stdout.

    export SUPADATA_API_KEY=<your-key>
    python -m social_loader.infrastructure.entrypoints.ingest \\
        https://www.youtube.com/watch?v=dQw4w9WgXcQ --lang en
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import httpx
from dotenv import load_dotenv

from social_loader.application.services.social_ingestor import SocialIngestService
from social_loader.domain.entities.document_record import (
    LoadRequest,
    Operation,
    TranscriptMode,
)
from social_loader.domain.errors import LoaderError
from social_loader.domain.ports.document_loader_port import IDocumentLoader
from social_loader.infrastructure.composition import build_load_use_case


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load transcripts or metadata for social media URLs."
    )
    parser.add_argument("urls", nargs="+", help="Video/post URLs to load.")
    parser.add_argument(
        "--operation",
        choices=[op.value for op in Operation],
        default=Operation.TRANSCRIPT.value,
    )
    parser.add_argument("--lang", help="Preferred transcript language code.")
    parser.add_argument("--mode", choices=[m.value for m in TranscriptMode])
    parser.add_argument(
        "--no-text",
        dest="text",
        action="store_false",
        help="Request timestamped chunks instead of plain transcript text.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    loader: Optional[IDocumentLoader] = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if loader is None:
        load_dotenv()
        loader = build_load_use_case()
    service = SocialIngestService(loader=loader)
    requests = [
        LoadRequest(
            url=url,
            operation=args.operation,
            lang=args.lang,
            text=args.text,
            mode=args.mode,
        )
        for url in args.urls
    ]

    try:
        records = service.ingest(requests)
    except (LoaderError, httpx.HTTPError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    json.dump(
        [{"page_content": r.page_content, "metadata": r.metadata} for r in records],
        sys.stdout,
        indent=2,
        ensure_ascii=False,
    )
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
