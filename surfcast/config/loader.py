"""JSON configuration loader for the StormGlass client."""

import json
from pathlib import Path

from pydantic import ValidationError

from ..utils.exceptions import ConfigValidationError
from ..utils.logger import setup_logger
from .schema import StormGlassConfig

logger = setup_logger(__name__)

# Location of the StormGlass section inside the application config file
RESOURCE_PATH: tuple[str, ...] = ("App", "resources", "StormGlass")


def load_config(json_path: Path) -> StormGlassConfig:
    """Load and validate StormGlass settings from a JSON config file.

    The file is expected to nest the settings under
    ``App.resources.StormGlass``, e.g.::

        {"App": {"resources": {"StormGlass": {"apiUrl": "...", "apiToken": "..."}}}}

    Args:
        json_path: Path to the JSON config file.

    Returns:
        Validated StormGlassConfig.

    Raises:
        ConfigValidationError: If the file is missing, is not valid JSON,
            lacks the StormGlass section, or holds invalid values.
    """
    if not json_path.exists():
        raise ConfigValidationError(
            f"Config file not found: {json_path}",
            context={"path": str(json_path)},
        )

    try:
        raw = json.loads(json_path.read_text())
    except (OSError, ValueError) as e:
        raise ConfigValidationError(
            f"Failed to read config JSON: {e}",
            context={"path": str(json_path), "error": str(e)},
        ) from e

    section = raw
    for key in RESOURCE_PATH:
        if not isinstance(section, dict) or key not in section:
            raise ConfigValidationError(
                "StormGlass section missing from config",
                context={"path": str(json_path), "section": ".".join(RESOURCE_PATH)},
            )
        section = section[key]

    if not isinstance(section, dict):
        raise ConfigValidationError(
            "StormGlass section must be an object",
            context={"path": str(json_path), "section": ".".join(RESOURCE_PATH)},
        )

    try:
        config = StormGlassConfig(**section)
    except ValidationError as e:
        logger.error(f"StormGlass config validation failed: {e}")
        raise ConfigValidationError(
            "StormGlass config validation failed",
            context={"path": str(json_path), "error": str(e)},
        ) from e

    logger.info(f"Loaded StormGlass config from {json_path} ({config.api_url})")
    return config
