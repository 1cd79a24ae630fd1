"""Markdown content parser.

Markdown files may start with a YAML frontmatter block:

    ---
    title: My Post
    created: 2024-10-26
    tags: [python, notes]
    ---
    Body text with #hashtags.

Frontmatter values take precedence over the filename convention, which takes
precedence over file stats.
"""

import logging
import re
from pathlib import Path

import mistune
import yaml
from pydantic import ValidationError

from schemas.article import ParsedContent
from schemas.frontmatter import Frontmatter
from site_distiller.compilers.filters import clean_content
from site_distiller.exceptions import FrontmatterDecodeError

from .metadata import (
    extract_body_tags,
    extract_first_url,
    extract_metadata_from_path,
    file_dates,
    normalize_tags,
    try_parse_date,
)
from .parser import ContentParser
from .resource_validator import validate_resource_urls

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a document into its frontmatter block and body.

    Args:
        content: Full file text

    Returns:
        Tuple of (frontmatter YAML text or None, body)
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content
    return match.group(1), content[match.end():]


def load_frontmatter(block: str | None, path: Path) -> Frontmatter:
    """Decode a frontmatter block into a Frontmatter record.

    Scalars are loaded as raw strings (yaml.BaseLoader), so dates are
    validated later by the precedence chain rather than by YAML.

    Args:
        block: YAML text, or None when the file has no frontmatter
        path: Source file, for error context

    Returns:
        The decoded Frontmatter (empty when there is no block)

    Raises:
        FrontmatterDecodeError: If the YAML is malformed or has the wrong shape
    """
    if block is None:
        return Frontmatter()

    try:
        data = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise FrontmatterDecodeError(
            f"Malformed frontmatter in {path}: {e}", path
        ) from e

    if data is None:
        return Frontmatter()
    if not isinstance(data, dict):
        raise FrontmatterDecodeError(
            f"Frontmatter in {path} must be a mapping, got {type(data).__name__}",
            path,
        )

    try:
        return Frontmatter.model_validate(data)
    except ValidationError as e:
        raise FrontmatterDecodeError(
            f"Invalid frontmatter in {path}: {e.error_count()} error(s)",
            path,
            errors=e.errors(),
        ) from e


class MarkdownParser(ContentParser):
    """Parse .md files with optional YAML frontmatter.

    The body is rendered with mistune (strikethrough is the only plugin),
    sanitized, and then checked for relative resource links.
    """

    extension = ".md"

    def __init__(self) -> None:
        self._markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough"],
        )

    def parse(self, path: Path) -> ParsedContent:
        path_title, path_date = extract_metadata_from_path(path)
        content, stat_result = self._read_source(path)
        file_created, file_modified = file_dates(stat_result)

        block, body = split_frontmatter(content)
        frontmatter = load_frontmatter(block, path)

        created = (
            try_parse_date(frontmatter.created)
            or path_date
            or file_created
            or file_modified
        )
        modified = try_parse_date(frontmatter.modified) or file_modified

        tags = list(frontmatter.tags or [])
        tags.extend(extract_body_tags(body))

        rendered_html = self.render(body)
        validate_resource_urls(rendered_html, path)

        logger.debug(f"Parsed markdown file {path}")

        return ParsedContent(
            title=frontmatter.title or path_title,
            description=frontmatter.description or "",
            tags=normalize_tags(tags),
            created=created,
            modified=modified,
            link_url=frontmatter.link_url or extract_first_url(body),
            raw_content=body,
            rendered_html=rendered_html,
        )

    def render(self, body: str) -> str:
        """Render a Markdown body to sanitized HTML."""
        return clean_content(self._markdown(body))
