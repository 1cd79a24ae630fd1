"""Article schemas.

An article is the resolved, render-ready form of one content file. Parsing
produces a ParsedContent record; the assembler adds the slug and share links
to produce the final, immutable Article.
"""

from datetime import date

from pydantic import BaseModel


class ShareLink(BaseModel):
    """A social share link for one provider.

    Attributes:
        provider_name: Display name of the provider (e.g., "X", "Facebook")
        url: Fully expanded share URL
    """

    provider_name: str
    url: str

    model_config = {"frozen": True}


class ParsedContent(BaseModel):
    """Normalized output of a content-source parser.

    Attributes:
        title: Resolved title, never empty
        description: Explicit description or empty string
        tags: Deduplicated, sorted tag names
        created: Resolved creation date
        modified: Resolved modification date
        link_url: Canonical outbound link, if any
        raw_content: Body text (frontmatter stripped for Markdown)
        rendered_html: Sanitized HTML fragment
    """

    title: str
    description: str = ""
    tags: list[str] = []
    created: date
    modified: date
    link_url: str | None = None
    raw_content: str
    rendered_html: str

    model_config = {"frozen": True}


class Article(BaseModel):
    """A fully assembled article.

    Attributes:
        title: Resolved title
        description: Explicit description or empty string
        tags: Deduplicated, sorted tag names
        created: Resolved creation date
        modified: Resolved modification date
        link_url: Canonical outbound link, if any
        raw_content: Body text
        rendered_html: Sanitized HTML fragment
        slug: Filename stem, used to reference the article in generated assets
        share_links: Share links in provider order
    """

    title: str
    description: str = ""
    tags: list[str] = []
    created: date | None = None
    modified: date
    link_url: str | None = None
    raw_content: str
    rendered_html: str
    slug: str
    share_links: list[ShareLink] = []

    model_config = {"frozen": True}


class ArticleCollection(BaseModel):
    """An ordered collection of articles.

    Attributes:
        articles: Articles sorted by created date, newest first
        errors: One message per source file that was skipped
    """

    articles: list[Article] = []
    errors: list[str] = []
