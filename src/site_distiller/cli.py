"""Command-line interface for site-distiller."""

import argparse
import logging
import sys
from pathlib import Path

from site_distiller.aggregators import CollectionBuilder
from site_distiller.compilers import SiteCompiler
from site_distiller.config import load_site_config
from site_distiller.exceptions import ConfigError

DEFAULT_OUTPUT_DIR = Path("./public")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_site(args: argparse.Namespace) -> int:
    """Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_site_config(args.config)
    except ConfigError as e:
        logger.error(e.message)
        return 1

    builder = CollectionBuilder(config.provider_templates)
    collection = builder.build(args.source)

    try:
        compiler = SiteCompiler()
        manifest = compiler.compile(collection, config.model_dump(), args.output)
    except Exception as e:
        logger.error(f"Failed to generate site: {e}")
        return 1

    logger.info(f"Built site: {manifest.output_dir}")
    logger.info(f"  Articles: {manifest.article_count}")
    logger.info(f"  Files: {', '.join(manifest.files)}")

    if collection.errors:
        logger.warning(f"  Skipped: {len(collection.errors)}")
        for error in collection.errors:
            logger.warning(f"    - {error}")

    return 0


def inspect_file(args: argparse.Namespace) -> int:
    """Execute the inspect command.

    Parses a single file and prints the resulting article as JSON.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.file.is_file():
        logger.error(f"File not found: {args.file}")
        return 1

    try:
        config = load_site_config(args.config)
    except ConfigError as e:
        logger.error(e.message)
        return 1

    try:
        article = CollectionBuilder(config.provider_templates).build_article(args.file)
    except Exception as e:
        logger.error(f"Failed to parse {args.file}: {e}")
        return 1

    print(article.model_dump_json(indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="site-distiller",
        description="Generate a static site from Markdown and text files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Build the site from content files",
        description="Parse .md and .txt files under the source paths and write index.html, search_index.json and favicons to the output directory.",
    )
    build_parser.add_argument(
        "--source",
        type=Path,
        action="append",
        required=True,
        help="Content file or directory (may be repeated)",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for the site (default: {DEFAULT_OUTPUT_DIR})",
    )
    build_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML site configuration file",
    )
    build_parser.set_defaults(func=build_site)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the article resolved from a single file",
        description="Parse one content file and print the resolved article as JSON.",
    )
    inspect_parser.add_argument(
        "file",
        type=Path,
        help="Path to a .md or .txt file",
    )
    inspect_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML site configuration file (for share providers)",
    )
    inspect_parser.set_defaults(func=inspect_file)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
