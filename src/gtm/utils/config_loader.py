"""
Configuration loader for gtm.

Settings come from the built-in defaults, then the ledger's config.yml,
then ``GTM_<SECTION>_<KEY>`` environment variables.

"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml

from gtm.config import CONFIG_FILE_NAME, DEFAULT_CONFIG
from gtm.errors import GTMError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "GTM_"

# Constant for minimum number of parts in environment variable
MIN_ENV_VAR_PARTS = 2


class ConfigError(GTMError):
	"""Exception raised for configuration errors."""


def _coerce(value: str) -> bool | int | str:
	if value.lower() in ("true", "yes"):
		return True
	if value.lower() in ("false", "no"):
		return False
	try:
		return int(value)
	except ValueError:
		return value


class ConfigLoader:
	"""
	Loads and manages configuration for gtm.

	Ledger hooks, notes config and the ignore rule are fixed constants and
	are not part of this configuration.

	"""

	def __init__(self, gtm_path: Path | None = None, environ: dict[str, str] | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		    gtm_path: Ledger directory holding config.yml (optional)
		    environ: Environment to read overrides from, os.environ by default

		"""
		self.config: dict[str, Any] = {}
		self.config_file = gtm_path / CONFIG_FILE_NAME if gtm_path else None
		self.environ = os.environ if environ is None else environ
		self.load_config()

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		    Loaded configuration

		Raises:
		    ConfigError: If the configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file and self.config_file.exists():
			try:
				with self.config_file.open(encoding="utf-8") as f:
					file_config = yaml.safe_load(f)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				raise ConfigError(error_msg) from e

			if file_config is not None and not isinstance(file_config, dict):
				error_msg = f"Configuration in {self.config_file} must be a mapping"
				raise ConfigError(error_msg)
			if file_config:
				self._merge_configs(self.config, file_config)
			logger.debug("Loaded configuration from %s", self.config_file)

		self._apply_env_overrides()
		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""Recursively merge ``override`` into ``base``."""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply GTM_SECTION_KEY environment variable overrides."""
		for env_var, value in self.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var.lower().split("_")[1:]
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])
			if not isinstance(self.config.get(section), dict):
				self.config[section] = {}
			self.config[section][key] = _coerce(value)
			logger.debug("Applied environment override %s", env_var)

	def get(self, key: str, default: T | None = None) -> T | None:
		"""
		Get a configuration value using dot notation.

		Examples:
		    config.get("report.limit")

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default
		return cast("T", current)
