"""
Configuration management for the line Markdown converter.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

import lib.utils as utils

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "console": True,
    },
    "renderer": {
        "group-lists": False,
    },
}


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace an environment variable placeholder with its value.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the variable or the original placeholder if unset.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Strings are substituted, dicts and lists are processed recursively,
    everything else is returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def mergeConfigs(baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two configuration dictionaries, newConfig wins."""
    merged = baseConfig.copy()

    for key, value in newConfig.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = mergeConfigs(merged[key], value)
        else:
            merged[key] = value

    return merged


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(
        self,
        configPath: Optional[str] = None,
        configDirs: Optional[List[str]] = None,
        dotEnvFile: str = ".env",
    ):
        """Initialize ConfigManager with optional config file path and config directories."""
        self.config_path = configPath
        self.config_dirs = configDirs or []
        utils.loadDotEnv(path=dotEnvFile)
        self.config = substituteEnvVars(self._loadConfig())
        self._validateConfig()

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        dirPath = Path(directory)

        if not dirPath.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping")
            return []

        if not dirPath.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping")
            return []

        tomlFiles = [tomlFile for tomlFile in dirPath.rglob("*.toml") if tomlFile.is_file()]
        for tomlFile in tomlFiles:
            logger.debug(f"Found config file: {tomlFile}")

        return sorted(tomlFiles)

    def _loadConfig(self) -> Dict[str, Any]:
        """Load defaults, then the main TOML file, then every file from config dirs."""
        config: Dict[str, Any] = DEFAULT_CONFIG

        if self.config_path is not None:
            configFile = Path(self.config_path)
            if not configFile.exists() and not self.config_dirs:
                logger.error(f"Configuration file {self.config_path} not found!")
                sys.exit(1)

            if configFile.exists():
                try:
                    with open(configFile, "rb") as f:
                        config = mergeConfigs(config, tomli.load(f))
                    logger.info(f"Loaded main config from {self.config_path}")
                except (OSError, tomli.TOMLDecodeError) as e:
                    logger.error(f"Failed to load configuration: {e}")
                    sys.exit(1)

        for configDir in self.config_dirs:
            tomlFiles = self._findTomlFilesRecursive(configDir)
            logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")

            for tomlFile in tomlFiles:
                try:
                    with open(tomlFile, "rb") as f:
                        config = mergeConfigs(config, tomli.load(f))
                    logger.info(f"Merged config from {tomlFile}")
                except (OSError, tomli.TOMLDecodeError) as e:
                    # Continue with other files instead of exiting
                    logger.error(f"Failed to load config file {tomlFile}: {e}")

        return config

    def _validateConfig(self) -> None:
        """Check renderer settings, exit on invalid values."""
        rendererConfig = self.getRendererConfig()

        maxHeaderLevel = rendererConfig.get("max-header-level", None)
        if maxHeaderLevel is not None and (
            isinstance(maxHeaderLevel, bool) or not isinstance(maxHeaderLevel, int) or maxHeaderLevel < 1
        ):
            logger.error(f"renderer.max-header-level must be a positive integer, got {maxHeaderLevel!r}")
            sys.exit(1)

        if not isinstance(rendererConfig.get("group-lists", False), bool):
            logger.error(f"renderer.group-lists must be a boolean, got {rendererConfig['group-lists']!r}")
            sys.exit(1)

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getRendererConfig(self) -> Dict[str, Any]:
        """
        Get renderer configuration.

        Keys:
            group-lists: wrap consecutive list items in `<ul>`
            max-header-level: clamp header levels, absent means no clamping
        """
        return self.get("renderer", {})

    def getRendererOptions(self) -> Dict[str, Any]:
        """Convert the renderer section to MarkdownParser options."""
        rendererConfig = self.getRendererConfig()
        return {
            "group_lists": rendererConfig.get("group-lists", False),
            "max_header_level": rendererConfig.get("max-header-level", None),
        }
