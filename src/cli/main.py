"""Radar CLI entry points.

This module exposes build and validate commands for radar sources.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from core.config import RadarConfig
from core.errors import RadarError
from core.logging_config import configure_logging
from core.types import (
    BuildContext,
    CsvFileSource,
    ProtectedSheetSource,
    PublicSheetSource,
    QueryParams,
    SourceDescriptor,
)
from ingest.error_classifier import classify_failure
from ingest.radar_client import RadarClient
from render.json_renderer import JsonRadarRenderer
from sources.source_factory import resolve_source_descriptor
from sources.source_title import extract_sheet_id


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="radar", description="Technology radar builder")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_build_command(subparsers)
    _add_validate_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None, client: RadarClient | None = None) -> int:
    """Run the radar CLI.

    Args:
        argv: Optional argument vector.
        client: Optional SDK client, built from the environment by default.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    radar_client = client or RadarClient()
    if args.command == "build":
        return _run_build_command(radar_client, args)
    if args.command == "validate":
        return _run_validate_command(radar_client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def run() -> int:
    """Configure logging from the environment and run the CLI."""
    config = RadarConfig.from_env()
    configure_logging(config.log_level)
    return main(client=RadarClient(config))


def _run_build_command(client: RadarClient, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source = _resolve_source(args)
    viewport_height = args.viewport_height or client.config.viewport_height
    output_path = Path(args.output) if args.output else None
    renderer = JsonRadarRenderer(
        output_path=output_path,
        stream=None if output_path else sys.stdout,
    )
    context = BuildContext(viewport_height=viewport_height, renderer=renderer)
    outcome = client.build(source, context)
    if outcome.kind == "unauthorized" and args.switch_account:
        outcome = client.switch_account(outcome, context)
    if outcome.kind != "built":
        print(outcome.message, file=sys.stderr)
        print(outcome.guidance, file=sys.stderr)
        return 1
    print(outcome.title, file=sys.stderr if output_path is None else sys.stdout)
    return 0


def _run_validate_command(client: RadarClient, args: argparse.Namespace) -> int:
    """Handle validate command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source = _resolve_source(args)
    try:
        radar = client.load_radar(source)
    except RadarError as error:
        failure = classify_failure(error, source)
        print(failure.message, file=sys.stderr)
        return 1
    for quadrant in radar.quadrants:
        print(f"{quadrant.name}\t{len(quadrant.entries)}")
    print("rings\t" + ",".join(ring.name for ring in radar.rings()))
    return 0


def _resolve_source(args: argparse.Namespace) -> SourceDescriptor:
    """Map the source argument onto a descriptor.

    Bare ids that are neither URLs nor CSV files are read as sheet ids.
    """
    if args.protected:
        return ProtectedSheetSource(
            sheet_id=extract_sheet_id(args.source),
            sheet_name=args.sheet_name,
        )
    source = resolve_source_descriptor(QueryParams(args.source, args.sheet_name))
    if source is not None:
        return source
    if args.source.endswith(".csv"):
        return CsvFileSource(url=args.source)
    return PublicSheetSource(sheet_id=args.source, sheet_name=args.sheet_name)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="Google Sheet URL or id, CSV URL, s3:// URI, or CSV path")
    parser.add_argument("--sheet-name", help="Sheet tab to read, first tab by default")
    parser.add_argument(
        "--protected",
        action="store_true",
        help="Read the sheet with the configured access token",
    )


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser("build", help="Build a radar and write it as JSON")
    _add_source_arguments(parser)
    parser.add_argument("--output", help="JSON output path, stdout by default")
    parser.add_argument("--viewport-height", type=int, help="Override RADAR_VIEWPORT_HEIGHT")
    parser.add_argument(
        "--switch-account",
        action="store_true",
        help="Retry once with a forced account chooser when access is denied",
    )


def _add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser("validate", help="Check a source without rendering")
    _add_source_arguments(parser)
