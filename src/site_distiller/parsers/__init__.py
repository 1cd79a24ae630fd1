"""Content-source parsers for Markdown and plain-text files."""

from pathlib import Path

from schemas.article import ParsedContent
from site_distiller.exceptions import UnsupportedFileType

from .markdown_parser import MarkdownParser
from .metadata import extract_metadata_from_path
from .parser import ContentParser
from .resource_validator import validate_resource_urls
from .text_parser import TextParser

PARSERS: dict[str, ContentParser] = {
    parser.extension: parser for parser in (MarkdownParser(), TextParser())
}

SUPPORTED_EXTENSIONS = frozenset(PARSERS)


def parse_file(path: Path) -> ParsedContent:
    """Parse a content file with the parser registered for its extension.

    Raises:
        UnsupportedFileType: If no parser handles the extension
    """
    parser = PARSERS.get(path.suffix)
    if parser is None:
        raise UnsupportedFileType(path)
    return parser.parse(path)


__all__ = [
    "ContentParser",
    "MarkdownParser",
    "TextParser",
    "PARSERS",
    "SUPPORTED_EXTENSIONS",
    "extract_metadata_from_path",
    "parse_file",
    "validate_resource_urls",
]
