"""
ConfigLoader module for loading and validating client configuration files

Configuration may be written in TOML or YAML:

    [api]
    base_url = "https://shop.example.com"
    version = "v3"

    [authentication]
    consumer_key_env = "WC_CONSUMER_KEY"
    consumer_secret_env = "WC_CONSUMER_SECRET"

    [http]
    timeout = 30

    [retries]
    max_attempts = 3

Credentials are never stored in the file, only the names of the environment
variables holding them.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import WooCommerceError
from .http_client import DEFAULT_HTTP_TIMEOUT, DEFAULT_VERSION, App


class ConfigurationError(WooCommerceError):
    """Raised when configuration is invalid or incomplete"""
    pass


class MissingEnvironmentError(WooCommerceError):
    """Raised when required environment variables are missing"""
    pass


@dataclass
class ClientConfig:
    """Configuration data class for a WooCommerce client"""
    base_url: str
    authentication: Dict[str, Any]
    version: str = DEFAULT_VERSION
    path_prefix: Optional[str] = None
    timeout: float = DEFAULT_HTTP_TIMEOUT
    retries: int = 0
    app_name: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)


class ConfigLoader:
    """Loads and validates TOML or YAML client configuration files"""

    # Required configuration sections and their mandatory keys
    REQUIRED_SECTIONS = {
        'api': ['base_url'],
        'authentication': [],
    }

    # Either credential scheme satisfies [authentication]
    CREDENTIAL_SCHEMES = (
        ('consumer_key_env', 'consumer_secret_env'),
        ('token_env',),
    )

    @staticmethod
    def load_config(config_path: Union[str, Path]) -> ClientConfig:
        """
        Load client configuration from a TOML or YAML file

        Args:
            config_path: Path to a .toml, .yml or .yaml file

        Returns:
            ClientConfig with all configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file cannot be parsed or required
                configuration is missing
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix == '.toml':
            config_data = ConfigLoader._load_toml(config_path)
        elif suffix in ('.yml', '.yaml'):
            config_data = ConfigLoader._load_yaml(config_path)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {config_path.suffix}")

        ConfigLoader._validate_required_sections(config_data)

        api = config_data['api']
        http = config_data.get('http', {})
        retries = config_data.get('retries', {})

        try:
            timeout = float(http.get('timeout', DEFAULT_HTTP_TIMEOUT))
            max_attempts = int(retries.get('max_attempts', 0))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid numeric setting in {config_path}: {e}") from e

        known = {'api', 'authentication', 'http', 'retries'}
        return ClientConfig(
            base_url=api['base_url'],
            authentication=config_data['authentication'],
            version=api.get('version', DEFAULT_VERSION),
            path_prefix=api.get('path_prefix'),
            timeout=timeout,
            retries=max_attempts,
            app_name=api.get('name', ""),
            extra={key: value for key, value in config_data.items() if key not in known},
        )

    @staticmethod
    def _load_toml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'rb') as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}") from e

    @staticmethod
    def _load_yaml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration in {config_path} must be a mapping")
        return config_data

    @staticmethod
    def _validate_required_sections(config_data: Dict[str, Any]) -> None:
        """
        Validate that all required configuration sections and keys are present

        Args:
            config_data: Parsed configuration data

        Raises:
            ConfigurationError: If any required section or key is missing
        """
        missing_items = []

        for section_name, required_keys in ConfigLoader.REQUIRED_SECTIONS.items():
            section_data = config_data.get(section_name)
            if not isinstance(section_data, dict):
                missing_items.append(f"Section [{section_name}]")
                continue
            for key in required_keys:
                if key not in section_data:
                    missing_items.append(f"Key '{key}' in section [{section_name}]")

        auth = config_data.get('authentication')
        if isinstance(auth, dict) and not any(
            all(key in auth for key in scheme) for scheme in ConfigLoader.CREDENTIAL_SCHEMES
        ):
            missing_items.append(
                "Keys 'consumer_key_env' and 'consumer_secret_env', or 'token_env', "
                "in section [authentication]"
            )

        if missing_items:
            raise ConfigurationError(
                f"Missing required configuration items: {', '.join(missing_items)}"
            )

    @staticmethod
    def validate_environment_variables(config: ClientConfig) -> bool:
        """
        Validate that all required environment variables are set

        Args:
            config: ClientConfig object to validate

        Returns:
            True if all environment variables are present

        Raises:
            MissingEnvironmentError: If any required environment variables are missing
        """
        missing_vars = [
            env_var_name
            for key, env_var_name in config.authentication.items()
            if key.endswith('_env') and isinstance(env_var_name, str) and not os.getenv(env_var_name)
        ]

        if missing_vars:
            raise MissingEnvironmentError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

        return True

    @staticmethod
    def get_environment_value(env_var_name: str) -> str:
        """
        Get environment variable value with proper error handling

        Args:
            env_var_name: Name of the environment variable

        Returns:
            Value of the environment variable

        Raises:
            MissingEnvironmentError: If environment variable is not set
        """
        value = os.getenv(env_var_name)
        if value is None:
            raise MissingEnvironmentError(f"Environment variable '{env_var_name}' is not set")
        return value

    @staticmethod
    def resolve_app(config: ClientConfig) -> App:
        """
        Build store credentials from the environment variables the config names

        A token takes precedence over a consumer key/secret pair.

        Raises:
            MissingEnvironmentError: If a referenced environment variable is not set
        """
        auth = config.authentication
        if 'token_env' in auth:
            return App(
                jwt_token=ConfigLoader.get_environment_value(auth['token_env']),
                app_name=config.app_name,
            )
        return App(
            consumer_key=ConfigLoader.get_environment_value(auth['consumer_key_env']),
            consumer_secret=ConfigLoader.get_environment_value(auth['consumer_secret_env']),
            app_name=config.app_name,
        )
