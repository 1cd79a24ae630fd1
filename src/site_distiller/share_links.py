"""Social share link generation.

Provider templates contain placeholders that are replaced with
percent-encoded article values:

    {URL}    canonical link (empty when the article has none)
    {TITLE}  article title
    {TEXT}   raw article body
    {TAGS}   tags as "#tag1 #tag2", spaces inside a tag become "_"
"""

from collections.abc import Sequence
from urllib.parse import quote

from schemas.article import ShareLink


def encode(value: str) -> str:
    """Percent-encode everything outside the RFC 3986 unreserved set."""
    return quote(value, safe="")


def format_tags(tags: Sequence[str]) -> str:
    """Format tags as space-separated hashtags.

    Examples:
        >>> format_tags(["rust", "my tag"])
        '#rust #my_tag'
    """
    return " ".join(f"#{tag.replace(' ', '_')}" for tag in tags)


def generate_share_links(
    providers: Sequence[tuple[str, str]],
    url: str | None,
    title: str,
    text: str,
    tags: Sequence[str],
) -> list[ShareLink]:
    """Expand each provider's URL template for one article.

    Args:
        providers: (provider_name, url_template) pairs
        url: The article's canonical link, or None
        title: Article title
        text: Raw article body
        tags: Article tags

    Returns:
        One ShareLink per provider, in provider order
    """
    replacements = {
        "{URL}": encode(url or ""),
        "{TITLE}": encode(title),
        "{TEXT}": encode(text),
        "{TAGS}": encode(format_tags(tags)),
    }

    links = []
    for provider_name, template in providers:
        expanded = template
        for placeholder, value in replacements.items():
            expanded = expanded.replace(placeholder, value)
        links.append(ShareLink(provider_name=provider_name, url=expanded))
    return links
