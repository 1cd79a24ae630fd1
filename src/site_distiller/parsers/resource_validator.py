"""Validation of resource links in rendered HTML.

Every src/href value must be an absolute URL so the generated page does not
depend on files that were never copied to the output directory.
"""

import re
from pathlib import Path
from urllib.parse import urlsplit

from site_distiller.exceptions import ResourceLinkError

RESOURCE_PATTERN = re.compile(r"""(?:src|href)=["'](.*?)["']""")

SKIPPED_PREFIXES = ("#", "data:")


def is_absolute_url(value: str) -> bool:
    """Return True if the value has both a scheme and an authority."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def validate_resource_urls(html_content: str, source_file: Path) -> None:
    """Check that every resource link in the HTML is absolute.

    Empty values, in-page anchors and data URIs are skipped.

    Args:
        html_content: Rendered HTML fragment
        source_file: File the HTML was rendered from, for error context

    Raises:
        ResourceLinkError: On the first relative or invalid link
    """
    for url in RESOURCE_PATTERN.findall(html_content):
        if not url or url.startswith(SKIPPED_PREFIXES):
            continue
        if not is_absolute_url(url):
            raise ResourceLinkError(source_file, url)
