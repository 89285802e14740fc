"""
Service Settings Configuration

This module loads configuration from the prediction-settings YAML file.
It serves as the SINGLE SOURCE OF TRUTH for data-source and runtime settings.

WARNING: The prediction engine weights are NOT configuration. They live as
module constants in gamepulse.scoring and must not be read from here.

Usage:
    from gamepulse.config import settings as config

    response = requests.get(url, timeout=config.SETTINGS.http.timeout_seconds)

Read SETTINGS through the module so that reload_settings() is seen by
running code; a name imported with "from ... import SETTINGS" stays bound
to the object loaded at import time.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

SETTINGS_PATH_ENV = "GAMEPULSE_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "prediction-settings.yaml"


def _resolve_settings_path() -> Path:
    """Return the YAML path, honouring the environment override."""
    override = os.getenv(SETTINGS_PATH_ENV)
    return Path(override) if override else DEFAULT_SETTINGS_PATH


def _load_yaml_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from the YAML settings file."""
    yaml_path = path or _resolve_settings_path()

    if not yaml_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {yaml_path}\n"
            f"Set {SETTINGS_PATH_ENV} or restore the packaged prediction-settings.yaml."
        )

    with open(yaml_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class SourceSettings:
    """A single remote data source."""
    base_url: str
    enabled: bool
    api_key: Optional[str] = None
    api_key_env: Optional[str] = None

    def resolve_api_key(self) -> Optional[str]:
        """Literal key wins; otherwise read the configured environment variable."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.getenv(self.api_key_env) or None
        return None


@dataclass(frozen=True)
class SourcesSettings:
    cfbd: SourceSettings
    sportsdb: SourceSettings


@dataclass(frozen=True)
class HttpSettings:
    """Outbound HTTP behaviour."""
    timeout_seconds: float
    max_retries: int
    retry_backoff_seconds: float
    max_workers: int


@dataclass(frozen=True)
class CacheSettings:
    ttl_seconds: int


@dataclass(frozen=True)
class ProfileDefaults:
    """Values used when remote data for a team is partial."""
    wins: int
    losses: int
    ppg: float
    papg: float
    strength_min: float
    strength_max: float


@dataclass(frozen=True)
class ServiceSettings:
    host: str
    port: int
    load_on_startup: bool


@dataclass(frozen=True)
class Settings:
    """Complete service configuration."""
    version: str
    last_updated: str
    sources: SourcesSettings
    http: HttpSettings
    cache: CacheSettings
    profile_defaults: ProfileDefaults
    service: ServiceSettings


def _build_source(raw: Dict[str, Any]) -> SourceSettings:
    return SourceSettings(
        base_url=raw['base_url'].rstrip('/'),
        enabled=raw.get('enabled', True),
        api_key=raw.get('api_key'),
        api_key_env=raw.get('api_key_env')
    )


def _build_settings(raw_config: Dict[str, Any]) -> Settings:
    """Build typed configuration from raw YAML dict."""
    return Settings(
        version=str(raw_config['version']),
        last_updated=str(raw_config['last_updated']),
        sources=SourcesSettings(
            cfbd=_build_source(raw_config['sources']['cfbd']),
            sportsdb=_build_source(raw_config['sources']['sportsdb'])
        ),
        http=HttpSettings(
            timeout_seconds=raw_config['http']['timeout_seconds'],
            max_retries=raw_config['http']['max_retries'],
            retry_backoff_seconds=raw_config['http']['retry_backoff_seconds'],
            max_workers=raw_config['http']['max_workers']
        ),
        cache=CacheSettings(
            ttl_seconds=raw_config['cache']['ttl_seconds']
        ),
        profile_defaults=ProfileDefaults(
            wins=raw_config['profile_defaults']['wins'],
            losses=raw_config['profile_defaults']['losses'],
            ppg=raw_config['profile_defaults']['ppg'],
            papg=raw_config['profile_defaults']['papg'],
            strength_min=raw_config['profile_defaults']['strength_min'],
            strength_max=raw_config['profile_defaults']['strength_max']
        ),
        service=ServiceSettings(
            host=raw_config['service']['host'],
            port=raw_config['service']['port'],
            load_on_startup=raw_config['service'].get('load_on_startup', True)
        )
    )


# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

# Load configuration at module import time
# so that YAML syntax errors surface immediately
SETTINGS: Settings = _build_settings(_load_yaml_config())


def get_setting(path: str) -> Union[float, int, str, bool, Dict, None]:
    """
    Get a setting value by dot-notation path.

    Args:
        path: Dot-notation path (e.g., 'http.timeout_seconds')

    Returns:
        The setting value

    Example:
        >>> get_setting('cache.ttl_seconds')
        3600
    """
    value: Any = SETTINGS

    for key in path.split('.'):
        if isinstance(value, dict):
            value = value[key]
        else:
            value = getattr(value, key)

    return value


def reload_settings(path: Optional[Path] = None) -> Settings:
    """
    Reload configuration from the YAML file.

    Useful for testing or when configuration changes at runtime.

    Returns:
        Updated Settings instance
    """
    global SETTINGS
    SETTINGS = _build_settings(_load_yaml_config(path))
    validate_settings(SETTINGS)
    return SETTINGS


# =============================================================================
# VALIDATION
# =============================================================================

def validate_settings(settings: Optional[Settings] = None) -> None:
    """
    Validate that all settings are present and coherent.

    Raises:
        ValueError: If any setting is invalid
    """
    settings = settings or SETTINGS
    errors = []

    if settings.http.timeout_seconds <= 0:
        errors.append("http.timeout_seconds must be positive")

    if settings.http.max_retries < 1:
        errors.append("http.max_retries must be at least 1")

    if settings.http.retry_backoff_seconds < 0:
        errors.append("http.retry_backoff_seconds must be non-negative")

    if settings.http.max_workers < 1:
        errors.append("http.max_workers must be at least 1")

    if settings.cache.ttl_seconds < 0:
        errors.append("cache.ttl_seconds must be non-negative")

    defaults = settings.profile_defaults
    if defaults.wins < 0 or defaults.losses < 0:
        errors.append("profile_defaults.wins/losses must be non-negative")

    if defaults.wins + defaults.losses == 0:
        errors.append("profile_defaults must describe at least one game")

    if defaults.ppg < 0 or defaults.papg < 0:
        errors.append("profile_defaults.ppg/papg must be non-negative")

    if defaults.strength_min > defaults.strength_max:
        errors.append("profile_defaults.strength_min must not exceed strength_max")

    if not 0 < settings.service.port < 65536:
        errors.append("service.port must be a valid TCP port")

    if errors:
        raise ValueError("Configuration validation failed:\n" + "\n".join(errors))


# Validate on import
validate_settings()
