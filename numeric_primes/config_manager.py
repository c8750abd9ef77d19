"""
YAML configuration for numeric_primes.

A base file (e.g. primes.yaml) may sit next to a primes.local.yaml whose
values are deep merged on top of it. The merged mapping is then flattened
onto Settings field names:

    primes:
      probable_prime_certainty: 20
      parallel_batch_size: 128
    logging:
      level: DEBUG
      file: logs/primes.log
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# YAML logging keys and the Settings fields they set.
LOGGING_KEYS = {
    'level': 'log_level',
    'file': 'log_file',
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge override into base, recursing into nested mappings.

    Example:
        >>> deep_merge({'primes': {'a': 1, 'b': 2}}, {'primes': {'b': 3}})
        {'primes': {'a': 1, 'b': 3}}

    Returns:
        A new dict; neither input is modified
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Read primes.yaml style files and their local overrides."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ConfigManager")

    @staticmethod
    def local_path_for(config_file: Path) -> Path:
        """primes.yaml -> primes.local.yaml in the same directory."""
        return config_file.with_name(f"{config_file.stem}.local.yaml")

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not data:
            self.logger.warning(f"Configuration file is empty: {path}")
            return {}
        return data

    def _read_local(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            self.logger.debug(f"No local configuration at {path}")
            return None

        try:
            return self._read(path)
        except yaml.YAMLError as e:
            # A broken override must not hide the base configuration.
            self.logger.error(f"Ignoring unparsable local configuration {path}: {e}")
            return None

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load a configuration file merged with its local overrides.

        Raises:
            FileNotFoundError: If the base file doesn't exist
            yaml.YAMLError: If the base file cannot be parsed
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.logger.debug(f"Loading configuration from {config_file}")
        config = self._read(config_file)

        local = self._read_local(self.local_path_for(config_file))
        if local:
            self.logger.info(f"Applying local overrides from {self.local_path_for(config_file)}")
            config = deep_merge(config, local)

        return config

    def settings_values(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten a loaded configuration onto Settings field names.

        Top-level scalars are taken as-is, the 'primes' section is merged in
        and the 'logging' section is mapped through LOGGING_KEYS.
        """
        values = {k: v for k, v in config.items() if not isinstance(v, dict)}
        values.update(config.get('primes') or {})

        section = config.get('logging') or {}
        for key, field in LOGGING_KEYS.items():
            if key in section:
                values[field] = section[key]

        return values
