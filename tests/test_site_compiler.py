"""Tests for the Site Compiler and favicon generation."""

import json
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from schemas.article import ArticleCollection
from site_distiller.compilers import FaviconGenerator, SiteCompiler
from site_distiller.compilers.favicons import title_initial


class TestTitleInitial:
    """Tests for the favicon initial."""

    def test_uppercased_first_character(self):
        """The first character is upper-cased."""
        assert title_initial("my notes") == "M"

    def test_empty_title(self):
        """An empty title falls back to a dot."""
        assert title_initial("") == "●"


class TestFaviconGenerator:
    """Tests for FaviconGenerator.generate."""

    def test_writes_all_icons(self, tmp_path):
        """SVG, PNG and ICO icons are written."""
        files = FaviconGenerator().generate("notes", tmp_path)

        assert sorted(files) == ["apple-touch-icon.png", "favicon.ico", "favicon.svg"]
        assert ">N</text>" in (tmp_path / "favicon.svg").read_text(encoding="utf-8")

        with Image.open(tmp_path / "apple-touch-icon.png") as png:
            assert png.size == (180, 180)
        with Image.open(tmp_path / "favicon.ico") as ico:
            assert ico.format == "ICO"
            assert ico.size == (32, 32)

    def test_svg_escapes_markup_initial(self, tmp_path):
        """A title starting with an XML special character yields a well-formed SVG."""
        FaviconGenerator(master_size=64).generate("&co", tmp_path)

        svg = ET.fromstring((tmp_path / "favicon.svg").read_text(encoding="utf-8"))
        text = svg.find("{http://www.w3.org/2000/svg}text")

        assert text.text == "&"


class TestSiteCompiler:
    """Tests for SiteCompiler.compile."""

    def test_writes_site(self, tmp_path, sample_collection):
        """All output files are written and listed in the manifest."""
        output_dir = tmp_path / "public" / "nested"

        manifest = SiteCompiler().compile(
            sample_collection, {"title": "Notes", "description": "Things"}, output_dir
        )

        assert manifest.article_count == 2
        assert set(manifest.files) == {
            "index.html",
            "search_index.json",
            "favicon.svg",
            "favicon.ico",
            "apple-touch-icon.png",
        }
        for name in manifest.files:
            assert (output_dir / name).exists()

    def test_search_index_follows_collection_order(self, tmp_path, sample_collection):
        """search_index.json has one entry per article, in order."""
        SiteCompiler().compile(sample_collection, {}, tmp_path)

        entries = json.loads((tmp_path / "search_index.json").read_text(encoding="utf-8"))

        assert [e["slug"] for e in entries] == ["2024-10-26-my-great-post", "older-post"]
        assert set(entries[0]) == {"title", "description", "tags", "html_content", "slug"}
        assert entries[0]["html_content"] == "<p>Hello #python</p>"
        assert entries[0]["tags"] == ["python", "static sites"]

    def test_index_page_content(self, tmp_path, sample_collection):
        """index.html renders settings and articles, escaping text fields."""
        SiteCompiler().compile(
            sample_collection, {"title": "Notes & Links", "description": "Things"}, tmp_path
        )

        page = (tmp_path / "index.html").read_text(encoding="utf-8")

        assert "<title>Notes &amp; Links</title>" in page
        assert "<p>Hello #python</p>" in page
        assert "Older &lt;Post&gt;" in page
        assert "October 26, 2024" in page
        assert "#python #static_sites" in page
        assert 'href="https://example.com/post"' in page
        assert page.index("My Great Post") < page.index("Older &lt;Post&gt;")

    def test_non_web_link_url_is_not_linked(self, tmp_path, sample_article):
        """A link_url that is not an http(s) URL renders the title as plain text."""
        article = sample_article.model_copy(update={"link_url": "javascript:alert(1)"})

        SiteCompiler().compile(ArticleCollection(articles=[article]), {}, tmp_path)

        page = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert "javascript:" not in page
        assert "My Great Post" in page

    def test_no_title_skips_favicons(self, tmp_path, sample_collection):
        """Favicons are only generated when settings carry a title."""
        manifest = SiteCompiler().compile(sample_collection, {}, tmp_path)

        assert manifest.files == ["search_index.json", "index.html"]
        assert not (tmp_path / "favicon.svg").exists()

    def test_empty_collection(self, tmp_path):
        """An empty collection still produces a page and an empty index."""
        SiteCompiler().compile(ArticleCollection(), {"title": "Empty"}, tmp_path)

        assert json.loads((tmp_path / "search_index.json").read_text()) == []
        assert "No articles yet." in (tmp_path / "index.html").read_text()

    def test_custom_template(self, tmp_path, sample_collection):
        """A custom template directory can be supplied."""
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "custom.j2").write_text(
            "{% for a in articles %}{{ a.slug }};{% endfor %}{{ settings.owner }}"
        )

        SiteCompiler(template_name="custom.j2", templates_dir=templates).compile(
            sample_collection, {"owner": "me"}, tmp_path / "out"
        )

        assert (tmp_path / "out" / "index.html").read_text() == (
            "2024-10-26-my-great-post;older-post;me"
        )

    def test_unwritable_output_is_fatal(self, tmp_path, sample_collection):
        """An output path that is a file raises."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            SiteCompiler().compile(sample_collection, {}, blocker)
