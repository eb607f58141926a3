"""
Configuration management for pomdeps.

Discovers the YAML configuration (explicit path, working directory or
packaged default), deep-merges user files over the defaults and applies
command-line overrides.
"""
import importlib.resources as importlib_resources
import os
from typing import Optional

import yaml

from pomdeps.utils.exceptions import ConfigurationError

DISCOVERED_CONFIG_FILE = "pomdeps.config.yaml"


class ConfigManager:
    """Manages pomdeps configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML in configuration", path=path, original_exception=e) from e

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        default_config_path = importlib_resources.files("pomdeps.config") / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        if not isinstance(user_config, dict):
            raise ConfigurationError("Configuration must be a mapping", path=user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise ConfigurationError("Config file not found", path=config_arg)

        # Priority 2: pomdeps.config.yaml in current directory
        if os.path.exists(DISCOVERED_CONFIG_FILE):
            return self.load_and_merge_config(DISCOVERED_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(
        self,
        config: dict,
        output_format: Optional[str] = None,
        output: Optional[str] = None,
        resolve_parents: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> dict:
        """Merge configuration with CLI arguments."""
        config.setdefault("output", {})
        config.setdefault("maven", {})
        config.setdefault("logging", {})

        if output_format is not None:
            config["output"]["format"] = output_format
        if output is not None:
            config["output"]["file"] = output
        if resolve_parents is not None:
            config["maven"]["resolve_parents"] = resolve_parents
        if log_level is not None:
            config["logging"]["level"] = log_level

        return config
