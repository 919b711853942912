"""
Configuration Serialization.

YAML persistence of configuration manifests: the resolved config of every run
is written next to its artifacts, and `--config` recipes are read back into
plain dictionaries before Pydantic validation.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import Any

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import yaml

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def _to_plain(obj: Any) -> Any:
    """Converts Paths and tuples so that `yaml.safe_dump` accepts them."""
    if isinstance(obj, dict):
        return {k: _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(v) for v in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj


def save_config_as_yaml(data: dict, yaml_path: Path) -> Path:
    """
    Writes a configuration dictionary to disk as YAML.

    Args:
        data: Serializable mapping (typically `Config.model_dump(mode="json")`).
        yaml_path: Destination file.

    Returns:
        The written path.
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(_to_plain(data), f, sort_keys=False, default_flow_style=False)
    logger.debug(f"Configuration manifest saved → {yaml_path}")
    return yaml_path


def load_config_from_yaml(yaml_path: Path) -> dict:
    """
    Reads a YAML recipe into a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {yaml_path} must contain a mapping at top level.")
    return data
