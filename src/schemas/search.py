"""Client-side search index schema."""

from pydantic import BaseModel

from schemas.article import Article


class SearchEntry(BaseModel):
    """One article's entry in search_index.json."""

    title: str
    description: str
    tags: list[str]
    html_content: str
    slug: str

    @classmethod
    def from_article(cls, article: Article) -> "SearchEntry":
        return cls(
            title=article.title,
            description=article.description,
            tags=list(article.tags),
            html_content=article.rendered_html,
            slug=article.slug,
        )
