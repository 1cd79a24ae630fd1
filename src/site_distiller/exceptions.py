"""Custom exceptions for content parsing and site configuration."""

from pathlib import Path


class ContentError(Exception):
    """Base exception for all per-file content errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class UnsupportedFileType(ContentError):
    """Raised when a file extension has no parser."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Unsupported file type: {path}")


class ContentIOError(ContentError):
    """Raised when a file or its metadata cannot be read."""

    def __init__(self, message: str, path: Path, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class FrontmatterDecodeError(ContentError):
    """Raised when a frontmatter block is malformed or has the wrong shape."""

    def __init__(self, message: str, path: Path, errors: list | None = None):
        self.path = path
        self.errors = errors or []
        super().__init__(message)


class ResourceLinkError(ContentError):
    """Raised when rendered HTML references a relative or invalid resource."""

    def __init__(self, path: Path, url: str):
        self.path = path
        self.url = url
        super().__init__(
            f"Validation failed for file '{path}': Found relative or invalid "
            f"resource link: '{url}'. All resource links (src/href) must be "
            f"absolute URLs."
        )


class DateParseError(ContentError):
    """Raised when a date string is not a valid YYYY-MM-DD date.

    This is a soft error: callers resolving a date fall through to the
    next source instead of failing the file.
    """

    pass


class ConfigError(Exception):
    """Raised when the site configuration cannot be loaded."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)
