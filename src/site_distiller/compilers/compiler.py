"""Base class for site compilers."""

from abc import ABC, abstractmethod
from pathlib import Path

from schemas.article import ArticleCollection
from schemas.site import SiteManifest


class Compiler(ABC):
    """Abstract base class for site compilers.

    Compilers write the final output for an article collection. Unlike
    per-file parsing, any failure while compiling is fatal for the run.
    """

    @abstractmethod
    def compile(
        self,
        collection: ArticleCollection,
        settings: dict,
        output_dir: Path,
    ) -> SiteManifest:
        """Compile a collection into output_dir.

        Args:
            collection: Ordered articles to publish
            settings: Free-form site settings passed to the template
            output_dir: Directory to write the site to

        Returns:
            SiteManifest describing the written files
        """
        pass
