"""Schema definitions for Site Distiller."""

from .article import Article, ArticleCollection, ParsedContent, ShareLink
from .frontmatter import Frontmatter
from .search import SearchEntry
from .site import ShareProvider, SiteConfig, SiteManifest

__all__ = [
    "Article",
    "ArticleCollection",
    "Frontmatter",
    "ParsedContent",
    "SearchEntry",
    "ShareLink",
    "ShareProvider",
    "SiteConfig",
    "SiteManifest",
]
