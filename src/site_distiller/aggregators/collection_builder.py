"""Collection Builder for assembling ordered article collections."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from schemas.article import Article, ArticleCollection
from site_distiller.aggregators.article_assembler import assemble_article
from site_distiller.parsers import SUPPORTED_EXTENSIONS, parse_file
from site_distiller.share_links import generate_share_links

logger = logging.getLogger(__name__)


def discover_files(source_paths: Iterable[Path]) -> Iterator[Path]:
    """Yield supported content files under the given paths.

    Files are yielded as given; directories are walked recursively in
    sorted order.

    Args:
        source_paths: Files or directories to scan

    Yields:
        Paths with a .md or .txt extension
    """
    for source_path in source_paths:
        if not source_path.exists():
            logger.warning(f"Source path not found: {source_path}")
            continue

        if source_path.is_file():
            candidates = [source_path]
        else:
            candidates = sorted(p for p in source_path.rglob("*") if p.is_file())

        for candidate in candidates:
            if candidate.suffix in SUPPORTED_EXTENSIONS:
                yield candidate


def _created_key(article: Article):
    if article.created is None:
        raise ValueError(f"Article {article.slug} has no created date")
    return article.created


class CollectionBuilder:
    """Parses content files into an ordered ArticleCollection.

    A file that fails to parse is logged and skipped; the remaining files
    are still processed.

    Example:
        builder = CollectionBuilder([("X", "https://x.com/intent/post?url={URL}")])
        collection = builder.build([Path("./content")])
    """

    def __init__(self, share_providers: Sequence[tuple[str, str]] = ()):
        """Initialize the collection builder.

        Args:
            share_providers: (provider_name, url_template) pairs used for
                every article's share links
        """
        self.share_providers = list(share_providers)

    def build_article(self, path: Path) -> Article:
        """Parse one file and assemble its Article.

        Args:
            path: Path to a .md or .txt file

        Returns:
            The assembled Article
        """
        parsed = parse_file(path)
        share_links = generate_share_links(
            self.share_providers,
            url=parsed.link_url,
            title=parsed.title,
            text=parsed.raw_content,
            tags=parsed.tags,
        )
        return assemble_article(path, parsed, share_links)

    def build(self, source_paths: Iterable[Path]) -> ArticleCollection:
        """Build a collection from every supported file under source_paths.

        Args:
            source_paths: Files or directories to scan

        Returns:
            ArticleCollection sorted by created date, newest first
        """
        collection = ArticleCollection()

        for path in discover_files(source_paths):
            logger.info(f"Processing: {path}")
            try:
                collection.articles.append(self.build_article(path))
            except Exception as e:
                logger.error(f"Skipping file {path}: {e}")
                collection.errors.append(f"{path}: {e}")

        # sorted() is stable, so equal dates keep discovery order
        collection.articles = sorted(
            collection.articles, key=_created_key, reverse=True
        )

        logger.info(
            f"Collected {len(collection.articles)} articles "
            f"({len(collection.errors)} skipped)"
        )
        return collection
