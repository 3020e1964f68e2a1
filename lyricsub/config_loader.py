"""Handles loading configuration from YAML files."""

import yaml
import os
import logging
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'api_base_url': 'https://studio-api.prod.suno.com',
    'request_timeout': 30,
    'token_file': 'token.txt',
    'token_preview_chars': 15,
    'validation_song_id': 'dummy-check',
    'output_dir': 'output',
    'show_progress': True,
    'log_dir': 'logs',
    'log_file': 'lyricsub.log',
}

class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        Values from the file are merged over DEFAULT_CONFIG.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
            logger.error(f"Configuration path is not a file: {config_path}")
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except OSError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if loaded is None:
            # Empty file
            loaded = {}
        if not isinstance(loaded, dict):
            logger.error(f"Configuration file {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")

        config = {**DEFAULT_CONFIG, **loaded}
        self._validate(config, config_path)
        logger.info(f"Configuration loaded successfully from {config_path}")
        return config

    def load_or_default(self, config_path: str, required: bool = False) -> dict:
        """
        Loads the configuration file, falling back to DEFAULT_CONFIG when it is
        missing and not explicitly required.

        Raises:
            FileNotFoundError: If the file is missing and required is True.
            ConfigurationError: If the file exists but is invalid.
        """
        if not required and not os.path.exists(config_path):
            logger.info(f"No configuration file at {config_path}; using built-in defaults.")
            return dict(DEFAULT_CONFIG)
        return self.load_config(config_path)

    def _validate(self, config: dict, config_path: str) -> None:
        timeout = config.get('request_timeout')
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigurationError(f"'request_timeout' in {config_path} must be a positive number, got {timeout!r}.")
        for key in ('api_base_url', 'token_file', 'output_dir', 'validation_song_id'):
            value = config.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"'{key}' in {config_path} must be a non-empty string.")
