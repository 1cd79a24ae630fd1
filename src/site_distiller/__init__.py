"""Generate a static site from a tree of Markdown and text files."""

__version__ = "0.1.0"
