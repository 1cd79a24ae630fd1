"""Base class for content-source parsers.

Each parser turns one source file into a ParsedContent record. There are two
strategies:

- MarkdownParser: YAML frontmatter + Markdown body (.md)
- TextParser: plain text, never treated as HTML (.txt)
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from schemas.article import ParsedContent
from site_distiller.exceptions import ContentIOError


class ContentParser(ABC):
    """Abstract base class for content-source parsers.

    Attributes:
        extension: File extension handled by this parser, including the dot
    """

    extension: str = ""

    @abstractmethod
    def parse(self, path: Path) -> ParsedContent:
        """Parse a single content file.

        Args:
            path: Path to the source file

        Returns:
            ParsedContent with every field resolved
        """
        pass

    def _read_source(self, path: Path) -> tuple[str, os.stat_result]:
        """Read the file text and stat it, once each.

        Raises:
            ContentIOError: If the file or its metadata cannot be read
        """
        try:
            content = path.read_text(encoding="utf-8")
            stat_result = path.stat()
        except (OSError, UnicodeDecodeError) as e:
            raise ContentIOError(f"Could not read {path}: {e}", path) from e
        return content, stat_result
