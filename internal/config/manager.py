"""
Configuration management for Markdown Preview.
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

PREVIEW_MODES = ("preview", "source")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholders with actual values.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute environment variable placeholders in configuration values.

    Placeholders have the form ${VAR_NAME}. Strings, dictionaries and lists are
    processed, other values are returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading for Markdown Preview."""

    def __init__(
        self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None, dotEnvFile: str = ".env"
    ):
        """Initialize ConfigManager with config file path and optional config directories."""
        self.config_path = configPath
        self.config_dirs = configDirs or []
        utils.load_dotenv(path=dotEnvFile)
        self.config = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        toml_files: List[Path] = []
        dir_path = Path(directory)

        if not dir_path.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping")
            return toml_files

        if not dir_path.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping")
            return toml_files

        for toml_file in dir_path.rglob("*.toml"):
            if toml_file.is_file():
                toml_files.append(toml_file)
                logger.debug(f"Found config file: {toml_file}")

        return sorted(toml_files)  # Sort for consistent ordering

    def _mergeConfigs(self, base_config: Dict[str, Any], new_config: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries."""
        merged = base_config.copy()

        for key, value in new_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                # Recursively merge nested dictionaries
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                # Override with new value
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """
        Load configuration from TOML file and optional config directories.

        A missing main file means defaults. An unreadable or malformed main
        file terminates the process; broken files inside config directories
        are logged and skipped.

        Raises:
            SystemExit: If the main configuration file cannot be loaded.
        """
        config: Dict[str, Any] = {}
        config_file = Path(self.config_path)

        if config_file.is_file():
            try:
                with open(config_file, "rb") as f:
                    config = tomli.load(f)
                logger.info(f"Loaded main config from {self.config_path}")
            except (OSError, tomli.TOMLDecodeError) as e:
                logger.error(f"Failed to load configuration from {self.config_path}: {e}")
                sys.exit(1)
        else:
            logger.info(f"Configuration file {self.config_path} not found, using defaults")

        if self.config_dirs:
            logger.info(f"Scanning {len(self.config_dirs)} config directories for .toml files")

            for config_dir in self.config_dirs:
                toml_files = self._findTomlFilesRecursive(config_dir)
                logger.info(f"Found {len(toml_files)} .toml files in {config_dir}")

                for toml_file in toml_files:
                    try:
                        with open(toml_file, "rb") as f:
                            dir_config = tomli.load(f)

                        # Merge this config into the main config
                        config = self._mergeConfigs(config, dir_config)
                        logger.info(f"Merged config from {toml_file}")

                    except (OSError, tomli.TOMLDecodeError) as e:
                        logger.error(f"Failed to load config file {toml_file}: {e}")
                        # Continue with other files instead of exiting

        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def _getInt(self, sectionName: str, key: str, default: Optional[int] = None) -> Optional[int]:
        """
        Get an integer option from a config section.

        Values that are not integers are logged and replaced with default.
        """
        value = self.get(sectionName, {}).get(key)
        if value is None:
            return default
        try:
            if isinstance(value, bool):
                raise TypeError("boolean is not a number")
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid value {value!r} for {sectionName}.{key}, using default")
            return default

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getParserConfig(self) -> Dict[str, Any]:
        """
        Get block parser options.

        Returns:
            Dict with keys understood by MarkdownParser (tab_width, indent_step)
        """
        options: Dict[str, Any] = {}
        tabWidth = self._getInt("parser", "tab-width")
        if tabWidth is not None:
            options["tab_width"] = tabWidth
        indentStep = self._getInt("parser", "indent-step")
        if indentStep is not None:
            options["indent_step"] = indentStep
        return options

    def getRendererConfig(self) -> Dict[str, Any]:
        """
        Get HTML renderer options.

        Returns:
            Dict with keys understood by HTMLRenderer (code_class_prefix, css, title)
        """
        section = self.get("renderer", {})
        options: Dict[str, Any] = {}
        if "code-class-prefix" in section:
            options["code_class_prefix"] = str(section["code-class-prefix"])
        if "css" in section:
            options["css"] = str(section["css"])
        if "title" in section:
            options["title"] = str(section["title"])
        return options

    def getPreviewConfig(self) -> Dict[str, Any]:
        """
        Get preview configuration.

        Returns:
            Dict with default-mode ("preview" or "source") and excerpt-lines
            (0 means the whole document)
        """
        section = self.get("preview", {})
        mode = section.get("default-mode", "preview")
        if mode not in PREVIEW_MODES:
            logger.warning(f"Unknown preview mode '{mode}' in config, using 'preview'")
            mode = "preview"
        return {
            "default-mode": mode,
            "excerpt-lines": max(0, self._getInt("preview", "excerpt-lines", 0)),
        }
