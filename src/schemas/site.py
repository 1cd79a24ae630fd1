"""Site configuration and output schemas.

Output directory structure:
    {output_dir}/
    ├── index.html            # Rendered page
    ├── search_index.json     # list[SearchEntry]
    ├── favicon.svg
    ├── favicon.ico
    └── apple-touch-icon.png
"""

from pydantic import BaseModel


class ShareProvider(BaseModel):
    """A share provider and its URL template.

    The template may contain the placeholders {URL}, {TITLE}, {TEXT}
    and {TAGS}.

    Attributes:
        name: Provider display name
        url_template: Share URL template
    """

    name: str
    url_template: str


class SiteConfig(BaseModel):
    """Site-wide settings.

    Unknown keys are kept so that templates can use arbitrary settings.

    Attributes:
        title: Site title, also the source of the favicon initial
        description: Site description
        share_providers: Providers used to build share links for each article
    """

    title: str = ""
    description: str = ""
    share_providers: list[ShareProvider] = []

    model_config = {"extra": "allow"}

    @property
    def provider_templates(self) -> list[tuple[str, str]]:
        return [(p.name, p.url_template) for p in self.share_providers]


class SiteManifest(BaseModel):
    """Summary of a compiled site.

    Attributes:
        output_dir: Directory the site was written to
        article_count: Number of articles rendered
        files: Names of the files written, relative to output_dir
    """

    output_dir: str
    article_count: int = 0
    files: list[str] = []
