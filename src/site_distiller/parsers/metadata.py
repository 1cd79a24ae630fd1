"""Metadata extraction from file paths, body text and file stats.

The patterns here are compiled once at import and only ever read.
"""

import logging
import os
import re
from datetime import date, datetime, timezone
from pathlib import Path

from site_distiller.exceptions import DateParseError

logger = logging.getLogger(__name__)

FIRST_URL_PATTERN = re.compile(r"https?://[^\s()<>]+")

# A letter, then any mix of letters, digits and hyphens (Unicode-aware).
BODY_TAG_PATTERN = re.compile(r"#([^\W\d_](?:[^\W_]|-)*)")

# YYYY?MM?DD?rest where each ? is a single non-alphanumeric character.
FILENAME_DATE_PATTERN = re.compile(
    r"^([0-9]{4})[^A-Za-z0-9]([0-9]{2})[^A-Za-z0-9]([0-9]{2})[^A-Za-z0-9](.+)"
)

ISO_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def parse_date_string(value: str) -> date:
    """Parse a strict YYYY-MM-DD date string.

    Args:
        value: Date string such as "2024-10-26"

    Returns:
        The parsed date

    Raises:
        DateParseError: If the string is not a valid calendar date
    """
    match = ISO_DATE_PATTERN.match(value.strip())
    if not match:
        raise DateParseError(f"Not a YYYY-MM-DD date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(f"Invalid date {value!r}: {e}") from e


def try_parse_date(value: str | None) -> date | None:
    """Parse a date, returning None for missing or invalid values."""
    if value is None:
        return None
    try:
        return parse_date_string(value)
    except DateParseError as e:
        logger.debug(f"Ignoring date: {e.message}")
        return None


def extract_metadata_from_path(path: Path) -> tuple[str, date | None]:
    """Derive a title and optional date from a filename.

    Args:
        path: Path to a content file

    Returns:
        Tuple of (title, date). The date is None when the filename has no
        date prefix or the prefix is not a valid calendar date.

    Examples:
        >>> extract_metadata_from_path(Path("2024-10-26-my-great-post.md"))
        ('my great post', datetime.date(2024, 10, 26))
        >>> extract_metadata_from_path(Path("notes_on_python.txt"))
        ('notes on python', None)
    """
    stem = path.stem
    match = FILENAME_DATE_PATTERN.match(stem)
    if match:
        year, month, day, title_source = match.groups()
        path_date = try_parse_date(f"{year}-{month}-{day}")
    else:
        title_source = stem
        path_date = None

    title = title_source.replace("-", " ").replace("_", " ")
    return title, path_date


def extract_first_url(content: str) -> str | None:
    """Return the first absolute http(s) URL in the content, if any."""
    match = FIRST_URL_PATTERN.search(content)
    return match.group(0) if match else None


def extract_body_tags(content: str) -> list[str]:
    """Extract hashtags (e.g., #python, #日本語) in the order they appear.

    Duplicates are kept; see normalize_tags().
    """
    return BODY_TAG_PATTERN.findall(content)


def normalize_tags(tags: list[str]) -> list[str]:
    """Drop empty tags, deduplicate and sort.

    Examples:
        >>> normalize_tags(["b", "a", "b", ""])
        ['a', 'b']
    """
    return sorted({tag for tag in tags if tag})


def timestamp_to_date(timestamp: float) -> date:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def file_dates(stat_result: os.stat_result) -> tuple[date | None, date]:
    """Convert file timestamps to calendar dates.

    Creation time is only reported on platforms that track it
    (st_birthtime); elsewhere it is None.

    Args:
        stat_result: Result of Path.stat()

    Returns:
        Tuple of (created, modified)
    """
    birthtime = getattr(stat_result, "st_birthtime", None)
    created = timestamp_to_date(birthtime) if birthtime is not None else None
    modified = timestamp_to_date(stat_result.st_mtime)
    return created, modified
