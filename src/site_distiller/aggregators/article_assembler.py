"""Assembly of parsed content into finished articles."""

from pathlib import Path

from schemas.article import Article, ParsedContent, ShareLink


def assemble_article(
    path: Path,
    parsed: ParsedContent,
    share_links: list[ShareLink],
) -> Article:
    """Build the immutable Article for one source file.

    The slug is the filename stem. Slugs are not checked for uniqueness, so
    two files with the same stem in different directories share a slug.

    Args:
        path: Source file path
        parsed: Parser output for the file
        share_links: Share links generated for the article

    Returns:
        The assembled Article
    """
    return Article(
        **parsed.model_dump(),
        slug=path.stem,
        share_links=share_links,
    )
