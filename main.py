"""
Markdown Preview - render markdown documents to HTML or a JSON block list.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from internal.config.manager import ConfigManager
from internal.services.preview import MODE_PREVIEW, MODE_SOURCE, PreviewError, PreviewService
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


class MarkdownPreviewApp:
    """Command line application: loads a document and writes its rendering."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize configuration, logging and the preview service."""
        self.configManager = ConfigManager(configPath, configDirs)

        # Initialize logging with config
        initLogging(self.configManager.getLoggingConfig())

        self.previewService = PreviewService(self.configManager)

    def run(self, args: argparse.Namespace) -> int:
        """Render the requested document, return process exit code."""
        try:
            document = self.previewService.loadDocument(args.file, excerptLines=args.excerpt)
            if args.format == "json":
                output = self.previewService.renderJson(document)
            else:
                output = self.previewService.renderHtml(document, mode=args.mode, fragment=args.fragment)
        except PreviewError as e:
            logger.error(f"Cannot render {args.file}: {e}")
            return 1

        if args.output:
            try:
                Path(args.output).write_text(output, encoding="utf-8")
            except OSError as e:
                logger.error(f"Failed to write {args.output}: {e}")
                return 1
            logger.info(f"Wrote {document.fileName} rendering to {args.output}")
        else:
            sys.stdout.write(output)
            if not output.endswith("\n"):
                sys.stdout.write("\n")

        return 0


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Markdown Preview - render markdown documents to HTML")
    parser.add_argument("file", nargs="?", help="Markdown document to render")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[MODE_PREVIEW, MODE_SOURCE],
        default=None,
        help="Render parsed blocks (preview) or the raw text (source), default from config",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["html", "json"],
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Emit only the HTML body content instead of a full page",
    )
    parser.add_argument(
        "--excerpt",
        type=int,
        default=None,
        metavar="N",
        help="Render only the first N lines of the document",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    args = parser.parse_args(argv)
    if not args.print_config and not args.file:
        parser.error("the following arguments are required: file")
    return args


def prettyPrintConfig(configManager: ConfigManager) -> None:
    """Pretty-print the loaded configuration."""
    print("=== Markdown Preview Configuration ===")
    print(json.dumps(configManager.config, indent=2, ensure_ascii=False, sort_keys=True, default=str))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    if args.print_config:
        prettyPrintConfig(ConfigManager(args.config, args.config_dir))
        return 0

    try:
        app = MarkdownPreviewApp(configPath=args.config, configDirs=args.config_dir)
        return app.run(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
