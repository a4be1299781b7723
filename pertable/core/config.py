"""
Configuration management for pertable.

Provides utilities for loading YAML/JSON configuration files and the
``DisplayConfig`` settings object consumed by the renderer and the CLI.

A configuration file looks like::

    log_level: WARNING
    display:
      use_styling: true
      max_width: 80
      label_color: blue
      header_color: cyan
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from pertable.core.constants import FG_COLORS, LOG_LEVELS, MAX_WIDTH
from pertable.core.logging_config import get_logger

logger = get_logger("core.config")

CONFIG_ENV_VAR = "PERTABLE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/pertable/config.yaml")


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    config_path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    dict
        Configuration dictionary (empty if the file is empty)

    Raises
    ------
    FileNotFoundError
        If config file does not exist
    ValueError
        If file format is not supported or the document is not a mapping
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, "r", encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        elif suffix == ".json":
            config = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. " "Use .yaml, .yml, or .json"
            )

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a mapping: {config_path}")

    logger.info(f"Loaded configuration from {config_path}")
    return config


def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """
    Save configuration to YAML or JSON file.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    config_path : str or Path
        Path to output file; suffixes other than .json are written as YAML
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    with open(config_path, "w", encoding="utf-8") as f:
        if suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


@dataclass
class DisplayConfig:
    """
    Settings for rendering an element to the terminal.

    Attributes
    ----------
    use_styling : bool
        Emit ANSI colours and bold text
    max_width : int
        Upper bound for the width of wrapped values
    label_color : str
        Colour name used for field labels
    header_color : str
        Colour name used for the header line
    log_level : str
        Logging level applied by the CLI
    """

    use_styling: bool = True
    max_width: int = MAX_WIDTH
    label_color: str = "blue"
    header_color: str = "cyan"
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "DisplayConfig":
        """
        Load display configuration from a YAML or JSON file.

        Missing keys fall back to the defaults. The ``display`` section is
        optional.

        Parameters
        ----------
        config_path : str or Path
            Path to configuration file

        Returns
        -------
        DisplayConfig
            Validated configuration instance
        """
        config = load_config(config_path)
        display = config.get("display") or {}

        if not isinstance(display, dict):
            raise ValueError("'display' section must be a mapping")

        instance = cls(
            use_styling=display.get("use_styling", True),
            max_width=display.get("max_width", MAX_WIDTH),
            label_color=display.get("label_color", "blue"),
            header_color=display.get("header_color", "cyan"),
            log_level=config.get("log_level", "WARNING"),
        )
        instance.validate()
        return instance

    def validate(self) -> bool:
        """
        Validate configuration.

        Returns
        -------
        bool
            True if valid

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        if not isinstance(self.use_styling, bool):
            raise ValueError("use_styling must be true or false")

        if isinstance(self.max_width, bool) or not isinstance(self.max_width, int):
            raise ValueError("max_width must be an integer")

        if self.max_width <= 0:
            raise ValueError("max_width must be positive")

        for name in ("label_color", "header_color"):
            color = getattr(self, name)
            if color not in FG_COLORS:
                raise ValueError(
                    f"Invalid {name}: {color}. " f"Must be one of: {sorted(FG_COLORS)}"
                )

        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of: {LOG_LEVELS}")

        return True


def find_config_path() -> Optional[Path]:
    """
    Locate the user configuration file.

    The ``PERTABLE_CONFIG`` environment variable wins; otherwise
    ``~/.config/pertable/config.yaml`` is used when it exists.

    Returns
    -------
    Path or None
        Path to the configuration file, or None if there is none
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    default_path = DEFAULT_CONFIG_PATH.expanduser()
    if default_path.exists():
        return default_path

    return None


def load_display_config() -> DisplayConfig:
    """Load the user's display configuration, or defaults if none exists."""
    config_path = find_config_path()
    if config_path is None:
        return DisplayConfig()
    return DisplayConfig.from_file(config_path)
