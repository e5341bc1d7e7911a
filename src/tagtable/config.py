"""Configuration for tagtable. Stored at ~/.tagtable/config.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Defaults used when the command line leaves them out."""

    columns: str = ""
    ellipsis: str = "..."
    align: bool = False


def config_from_dict(data: dict) -> Config:
    """Deserialize a Config from a JSON-compatible dict."""
    defaults = Config()
    columns = data.get("columns")
    ellipsis = data.get("ellipsis")
    align = data.get("align")
    # Values of the wrong JSON type fall back to the defaults.
    return Config(
        columns=columns if isinstance(columns, str) else defaults.columns,
        ellipsis=ellipsis if isinstance(ellipsis, str) else defaults.ellipsis,
        align=align if isinstance(align, bool) else defaults.align,
    )


def config_to_dict(config: Config) -> dict:
    """Serialize a Config to a JSON-compatible dict."""
    return {
        "columns": config.columns,
        "ellipsis": config.ellipsis,
        "align": config.align,
    }


def _get_config_dir() -> Path:
    return Path(os.environ.get("TAGTABLE_CONFIG_DIR", Path.home() / ".tagtable"))


def get_config_path() -> Path:
    return _get_config_dir() / "config.json"


def load_config() -> Config:
    config_path = get_config_path()
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text())
    except (OSError, ValueError) as e:
        logger.warning("Error reading config %s: %s", config_path, e)
        return Config()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return Config()
    return config_from_dict(data)


def save_config(config: Config) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config_to_dict(config), indent=2))
