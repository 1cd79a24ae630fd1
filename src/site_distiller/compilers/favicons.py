"""Favicon generation from the site title.

Produces an SVG favicon plus raster PNG and ICO variants showing the first
letter of the title in a white circle.
"""

import html
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

FALLBACK_INITIAL = "●"

SVG_TEMPLATE = """<svg viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">
    <circle cx="50" cy="50" r="48" fill="white" stroke="rgba(0,0,0,0.1)" stroke-width="2"/>
    <text x="50%" y="50%" dy=".35em" text-anchor="middle" font-family="sans-serif" font-size="100" font-weight="bold" fill="black">{initial}</text>
</svg>
"""

FAVICON_SVG = "favicon.svg"
FAVICON_ICO = "favicon.ico"
APPLE_TOUCH_ICON = "apple-touch-icon.png"


def title_initial(title: str) -> str:
    """Return the upper-cased first character of the title.

    Examples:
        >>> title_initial("notes")
        'N'
        >>> title_initial("")
        '●'
    """
    return title[:1].upper() or FALLBACK_INITIAL


class FaviconGenerator:
    """Render favicons for a site title.

    Raster icons are drawn once at a large master size and downscaled, which
    keeps the glyph edges smooth at 32px.

    Attributes:
        master_size: Edge length of the master raster in pixels
        touch_icon_size: Edge length of apple-touch-icon.png
        ico_size: Edge length of the image stored in favicon.ico
    """

    def __init__(
        self,
        master_size: int = 512,
        touch_icon_size: int = 180,
        ico_size: int = 32,
    ) -> None:
        self.master_size = master_size
        self.touch_icon_size = touch_icon_size
        self.ico_size = ico_size

    def generate(self, title: str, output_dir: Path) -> list[str]:
        """Write favicon.svg, apple-touch-icon.png and favicon.ico.

        Args:
            title: Site title
            output_dir: Directory to write the icons to

        Returns:
            Names of the files written
        """
        initial = title_initial(title)

        (output_dir / FAVICON_SVG).write_text(
            SVG_TEMPLATE.format(initial=html.escape(initial)), encoding="utf-8"
        )

        master = self._render_master(initial)

        touch_icon = master.resize(
            (self.touch_icon_size, self.touch_icon_size), Image.Resampling.LANCZOS
        )
        touch_icon.save(output_dir / APPLE_TOUCH_ICON, format="PNG")

        ico_image = master.resize((self.ico_size, self.ico_size), Image.Resampling.LANCZOS)
        ico_image.save(
            output_dir / FAVICON_ICO,
            format="ICO",
            sizes=[(self.ico_size, self.ico_size)],
        )

        logger.info(f"Generated favicons from title: '{title}'")
        return [FAVICON_SVG, FAVICON_ICO, APPLE_TOUCH_ICON]

    def _render_master(self, initial: str) -> Image.Image:
        """Draw the icon at master size, mirroring the SVG geometry."""
        size = self.master_size
        scale = size / 100
        image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)

        margin = 2 * scale
        draw.ellipse(
            (margin, margin, size - margin, size - margin),
            fill=(255, 255, 255, 255),
            outline=(0, 0, 0, 26),
            width=max(1, round(2 * scale)),
        )

        font = ImageFont.load_default(size=round(70 * scale))
        draw.text(
            (size / 2, size / 2),
            initial,
            font=font,
            fill=(0, 0, 0, 255),
            anchor="mm",
        )
        return image
