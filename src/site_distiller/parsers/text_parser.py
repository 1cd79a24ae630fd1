"""Plain-text content parser."""

import html
import logging
from pathlib import Path

from schemas.article import ParsedContent

from .metadata import (
    extract_body_tags,
    extract_first_url,
    extract_metadata_from_path,
    file_dates,
    normalize_tags,
)
from .parser import ContentParser

logger = logging.getLogger(__name__)


class TextParser(ContentParser):
    """Parse .txt files.

    Text files carry no frontmatter, so the title and date come from the
    filename and the file stats. The body is escaped and wrapped in a
    paragraph; it is never interpreted as HTML, so resource links are not
    validated.
    """

    extension = ".txt"

    def parse(self, path: Path) -> ParsedContent:
        path_title, path_date = extract_metadata_from_path(path)
        content, stat_result = self._read_source(path)
        file_created, file_modified = file_dates(stat_result)

        escaped = html.escape(content, quote=False).replace("\n", "<br>")
        rendered_html = f"<p>{escaped}</p>"

        logger.debug(f"Parsed text file {path}")

        return ParsedContent(
            title=path_title,
            description="",
            tags=normalize_tags(extract_body_tags(content)),
            created=path_date or file_created or file_modified,
            modified=file_modified,
            link_url=extract_first_url(content),
            raw_content=content,
            rendered_html=rendered_html,
        )
