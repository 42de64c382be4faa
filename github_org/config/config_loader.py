"""
Configuration loader for the GitHub organization client.
Supports per-environment dotenv files layered under a JSON config file.
"""

import copy
import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": "https://api.github.com",
        "graphql_path": "/graphql",
        "per_page": 100,
        "max_pages": 1000,
        "timeouts": {
            "connect": 10,
            "read": 30,
        },
    },
    "environment": {
        "name": "prod",
        "log_level": "INFO",
        "debug": False,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads and validates configuration from JSON files."""

    def __init__(self, config_file: str = "configs/config.json", environment: Optional[str] = None,
                 base_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_file: Path to configuration file, relative to base_path unless absolute
            environment: Environment name selecting envs/.env.<environment>
            base_path: Project root; defaults to the directory above the package
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self.environment = environment or "prod"
        self._explicit_environment = environment is not None
        self.base_path = Path(base_path) if base_path else Path(__file__).parent.parent.parent
        self._load_environment_config()
        self._load_config()
        self._validate_config()

    def _load_environment_config(self):
        """Load environment-specific dotenv files."""
        # The main .env may select the environment
        main_env_path = self.base_path / "envs" / ".env"
        if main_env_path.exists():
            load_dotenv(main_env_path, override=False)
            logger.debug("Loaded main env config from %s", main_env_path)

        env_from_file = os.getenv("GITHUB_ORG_ENVIRONMENT")
        if env_from_file and not self._explicit_environment:
            self.environment = env_from_file

        env_file_path = self.base_path / "envs" / f".env.{self.environment}"
        if env_file_path.exists():
            load_dotenv(env_file_path, override=True)
            logger.debug("Loaded %s specific config from %s", self.environment, env_file_path)

    def _load_config(self):
        """Load configuration from JSON file over the built-in defaults."""
        config_path = self.base_path / self.config_file
        if not config_path.exists():
            logger.debug("Configuration file %s not found, using defaults", config_path)
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")
        self.config = _merge(DEFAULT_CONFIG, loaded)
        logger.debug("Loaded configuration from: %s", config_path)

    def _validate_config(self):
        """Validate configuration values the client depends on."""
        per_page = self.get("api.per_page")
        if not isinstance(per_page, int) or not 1 <= per_page <= 100:
            raise ConfigurationError(f"api.per_page must be an integer between 1 and 100, got {per_page!r}")
        max_pages = self.get("api.max_pages")
        if max_pages is not None and (not isinstance(max_pages, int) or max_pages < 1):
            raise ConfigurationError(f"api.max_pages must be a positive integer or null, got {max_pages!r}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., "api.timeouts.read")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value = self.config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_environment(self) -> str:
        """Get current environment."""
        return self.environment

    def is_debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return bool(self.get("environment.debug", False))

    def get_graphql_url(self) -> str:
        return self.get("api.base_url").rstrip("/") + self.get("api.graphql_path", "/graphql")

    def setup_logging(self):
        """Setup logging based on configuration."""
        log_level = self.get("environment.log_level", "INFO")
        debug = self.is_debug_mode()

        level = logging.DEBUG if debug else getattr(logging, str(log_level).upper(), logging.INFO)

        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s" if debug else "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            handlers=[logging.StreamHandler()]
        )

        if debug:
            logger.debug("Debug mode enabled (environment=%s)", self.environment)
            logger.debug("API base URL: %s", self.get("api.base_url"))
