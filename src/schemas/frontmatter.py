"""Frontmatter schema for Markdown content files.

Frontmatter is a YAML block delimited by ``---`` lines at the top of a
Markdown file. It is loaded with every scalar kept as a raw string and then
validated here; dates are parsed later so that an invalid value can fall
through to the next source instead of failing the file.
"""

from pydantic import BaseModel, field_validator


class Frontmatter(BaseModel):
    """Optional metadata fields supplied by a Markdown file.

    Attributes:
        title: Explicit article title
        description: Short description
        tags: Explicit tag names
        created: Creation date as a raw "YYYY-MM-DD" string
        modified: Modification date as a raw "YYYY-MM-DD" string
        link_url: Canonical outbound link
    """

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    created: str | None = None
    modified: str | None = None
    link_url: str | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, value):
        """Treat blank scalars (``title:`` with no value) as absent."""
        if isinstance(value, str) and not value.strip():
            return None
        return value
