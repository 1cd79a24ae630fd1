"""Site Compiler for writing the static site.

Writes favicons, the client-side search index and the rendered index page
for an ordered article collection.
"""

import json
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas.article import ArticleCollection
from schemas.search import SearchEntry
from schemas.site import SiteManifest

from .compiler import Compiler
from .favicons import FaviconGenerator
from .filters import FILTERS

logger = logging.getLogger(__name__)

# Resolve the project root (4 levels up from this file):
#   site_compiler.py → compilers/ → site_distiller/ → src/ → project root
# If this file is ever moved, the chain of .parent calls must be updated.
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "resources" / "templates"

SEARCH_INDEX = "search_index.json"
INDEX_PAGE = "index.html"


class SiteCompiler(Compiler):
    """Compile an article collection into a static site.

    The SiteCompiler:
    1. Creates the output directory
    2. Generates favicons when the settings carry a title
    3. Writes search_index.json in collection order
    4. Renders index.html through a Jinja2 template

    Attributes:
        template_name: Name of the Jinja2 template file
        templates_dir: Directory containing templates
    """

    def __init__(
        self,
        template_name: str = "index.html.j2",
        templates_dir: Path | None = None,
        favicon_generator: FaviconGenerator | None = None,
    ):
        """Initialize the site compiler.

        Args:
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: resources/templates)
            favicon_generator: Optional FaviconGenerator for dependency injection
        """
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.favicons = favicon_generator or FaviconGenerator()

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def compile(
        self,
        collection: ArticleCollection,
        settings: dict,
        output_dir: Path,
    ) -> SiteManifest:
        """Write the site for a collection.

        Args:
            collection: Ordered articles to publish
            settings: Free-form site settings; "title" drives the favicons
            output_dir: Directory to write the site to

        Returns:
            SiteManifest listing the written files
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        manifest = SiteManifest(
            output_dir=str(output_dir),
            article_count=len(collection.articles),
        )

        title = settings.get("title")
        if isinstance(title, str):
            manifest.files.extend(self.favicons.generate(title, output_dir))

        self._write_search_index(collection, output_dir)
        manifest.files.append(SEARCH_INDEX)

        self._render_index(collection, settings, output_dir)
        manifest.files.append(INDEX_PAGE)

        logger.info(f"Site generated successfully in '{output_dir}'")
        return manifest

    def _write_search_index(
        self, collection: ArticleCollection, output_dir: Path
    ) -> None:
        """Write search_index.json, one entry per article in collection order."""
        entries = [
            SearchEntry.from_article(article).model_dump()
            for article in collection.articles
        ]
        index_path = output_dir / SEARCH_INDEX
        index_path.write_text(
            json.dumps(entries, ensure_ascii=False), encoding="utf-8"
        )
        logger.debug(f"Wrote search index with {len(entries)} entries to {index_path}")

    def _render_index(
        self,
        collection: ArticleCollection,
        settings: dict,
        output_dir: Path,
    ) -> None:
        """Render index.html with the settings and articles in context."""
        template = self._env.get_template(self.template_name)
        html_content = template.render(
            settings=settings,
            articles=collection.articles,
        )
        index_path = output_dir / INDEX_PAGE
        index_path.write_text(html_content, encoding="utf-8")
        logger.debug(f"Wrote {index_path}")
