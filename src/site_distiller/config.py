"""Site configuration loading.

Settings live in a YAML file:

    title: My Notes
    description: Things worth keeping
    share_providers:
      - name: X
        url_template: "https://x.com/intent/post?text={TITLE}&url={URL}"

Any extra keys are kept and passed to the page template.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from schemas.site import SiteConfig
from site_distiller.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load and validate the site configuration.

    Args:
        path: YAML config file, or None for the defaults

    Returns:
        The validated SiteConfig

    Raises:
        ConfigError: If the file is missing, malformed or invalid
    """
    if path is None:
        return SiteConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        config = SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug(
        f"Loaded config from {path} with "
        f"{len(config.share_providers)} share providers"
    )
    return config
