"""Jinja2 filters and HTML helpers for site rendering.

These filters are used in index.html.j2. clean_content is also applied to
rendered Markdown before it is stored on an article.
"""

import re
from datetime import date
from urllib.parse import urlsplit

from site_distiller.share_links import format_tags


def format_date(value: date | str | None) -> str:
    """Format a date as a human-readable string.

    Args:
        value: A date, or an ISO "YYYY-MM-DD" string

    Returns:
        Formatted date string like "October 26, 2024"

    Examples:
        >>> format_date(date(2024, 10, 26))
        'October 26, 2024'
        >>> format_date("2024-01-05")
        'January 5, 2024'
    """
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime("%B %d, %Y").replace(" 0", " ")


def hashtags(tags: list[str] | None) -> str:
    """Render tags as space-separated hashtags.

    Examples:
        >>> hashtags(["python", "static sites"])
        '#python #static_sites'
    """
    return format_tags(tags or [])


def web_url(value: str | None) -> str | None:
    """Return the URL if it is an absolute http(s) link, else None.

    Examples:
        >>> web_url("https://example.com/post")
        'https://example.com/post'
        >>> web_url("javascript:alert(1)") is None
        True
    """
    if not value:
        return None
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if parts.scheme.lower() in ("http", "https") and parts.netloc:
        return value
    return None


def clean_content(html: str) -> str:
    """Strip executable markup from rendered Markdown.

    Raw HTML is allowed in Markdown bodies, so script, iframe and noscript
    elements are dropped before the HTML is stored on an article and
    embedded in the page.

    Args:
        html: HTML rendered from a Markdown body

    Returns:
        The HTML without executable elements, whitespace-trimmed

    Examples:
        >>> clean_content('<p>Hello</p><script>alert("x")</script>')
        '<p>Hello</p>'
    """
    if not html:
        return ""

    html = re.sub(r"<script[^>]*>.*?</script>", "", html, flags=re.DOTALL | re.IGNORECASE)

    html = re.sub(r"<iframe[^>]*>.*?</iframe>", "", html, flags=re.DOTALL | re.IGNORECASE)
    html = re.sub(r"<iframe[^>]*/?>", "", html, flags=re.IGNORECASE)

    html = re.sub(r"<noscript[^>]*>.*?</noscript>", "", html, flags=re.DOTALL | re.IGNORECASE)

    return html.strip()


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "hashtags": hashtags,
    "clean_content": clean_content,
    "web_url": web_url,
}
