#!/usr/bin/env python3
"""
PR Showcase - Main CLI entrypoint

Collects a GitHub user's open and merged pull requests, attaches each
repository's logo and each PR's cleaned commit history, and renders the
result as an HTML page (or JSON).

Usage:
    python main.py serve                              # Web server on :8080
    python main.py serve --host 0.0.0.0 --port 9000
    python main.py report                             # HTML report to stdout
    python main.py report --output report.html
    python main.py report --format json --output prs.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import requests

from fetchers.github import GitHubFetcher
from models.config_models import Config
from pipeline.renderer import ReportRenderError, export_report_html, render_report
from pipeline.report_assembler import ReportAssembler
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger()


def generate_report(
    config: Config,
    output: Optional[Path] = None,
    output_format: str = "html",
    assembler: Optional[ReportAssembler] = None
) -> bool:
    """
    Build the report once and write it to a file or stdout.

    Args:
        config: Validated configuration
        output: Destination file (stdout when None)
        output_format: "html" or "json"
        assembler: Pre-built assembler (created from config when None)

    Returns:
        True if a report was written, False if nothing was found or a step failed
    """
    if assembler is None:
        assembler = ReportAssembler(GitHubFetcher(config), commit_workers=config.commit_workers)

    logger.info(f"Building PR report for {config.credentials.github_username}")

    try:
        report = assembler.run()
    except requests.RequestException as e:
        logger.error(f"Error fetching PRs: {e}")
        return False

    if not report.total:
        logger.error("No matching PRs found.")
        return False

    if output_format == "html" and output is not None:
        try:
            export_report_html(report, output)
        except ReportRenderError as e:
            logger.error(f"Error loading template: {e}")
            return False
        logger.info(f"Wrote {report.total} PRs to {output}")
        return True

    if output_format == "json":
        content = json.dumps(report.model_dump(mode="json"), indent=2)
    else:
        try:
            content = render_report(report)
        except ReportRenderError as e:
            logger.error(f"Error loading template: {e}")
            return False

    if output is None:
        sys.stdout.write(content)
        sys.stdout.write("\n")
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {report.total} PRs to {output}")

    return True


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="PR Showcase - a GitHub user's pull requests on one page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve the report at http://127.0.0.1:8080/
  python main.py serve

  # Write a static HTML report
  python main.py report --output report.html

  # Dump the report data as JSON
  python main.py report --format json
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the report web server"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to run the server on (default: 8080)"
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (development only)"
    )

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        help="Build the report once and write it out"
    )
    report_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File to write (default: stdout)"
    )
    report_parser.add_argument(
        "--format",
        choices=["html", "json"],
        default="html",
        help="Output format (default: html)"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Missing credentials exit here with status 1
    config = load_config()
    # Keep stdout clean when the report itself goes there
    log_stream = sys.stderr if getattr(args, "output", "") is None else sys.stdout
    setup_logger(config.log_level, stream=log_stream)

    if args.command == "serve":
        from backend.server import run_server
        run_server(host=args.host, port=args.port, reload=args.reload)
        sys.exit(0)

    elif args.command == "report":
        success = generate_report(
            config,
            output=args.output,
            output_format=args.format
        )
        sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
