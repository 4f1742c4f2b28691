"""
Spell Service Configuration Module
==================================
Centralized configuration for the spell checking session, its dictionary
pool, result cache and suggestion thresholds.

Configuration can be set via:
1. Environment variables (SPELLSERVICE_POOL_SIZE=4)
2. Config file (spellservice_config.json, or SPELLSERVICE_CONFIG_FILE)
3. Direct API calls (config.set('pool.size', 4))

Components never read the global instance themselves: the service hands its
sections to the pool, cache and gatherer constructors, so tests can inject
their own values.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

# Default configuration path
CONFIG_FILE = Path(os.environ.get(
    'SPELLSERVICE_CONFIG_FILE',
    Path(__file__).parent.parent / "spellservice_config.json"
))


@dataclass
class PoolConfig:
    """Dictionary pool configuration."""
    size: int = 2
    timeout_seconds: float = 3.0


@dataclass
class CacheConfig:
    """Result cache configuration."""
    capacity: int = 50


@dataclass
class SuggestionConfig:
    """Suggestion gathering thresholds."""
    suggestion_threshold: float = 0.0    # Candidates below this are dropped
    recommended_threshold: float = 0.5   # Best score above this is "recommended"
    block_offensive_words: bool = True


@dataclass
class CheckabilityConfig:
    """Checkability filter configuration."""
    min_letter_ratio: float = 0.75  # At least 3/4 of the code points must be letters


@dataclass
class DictionaryConfig:
    """Dictionary backend configuration."""
    backend: str = "symspell"  # symspell or enchant
    max_edit_distance: int = 2
    prefix_length: int = 7
    custom_dictionary: Optional[str] = None
    user_dictionary: Optional[str] = None
    blocked_words: List[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "json"  # Options: json, text
    to_console: bool = True
    to_file: bool = False
    log_dir: str = "logs"


@dataclass
class SpellServiceConfig:
    """Master spell service configuration."""
    pool: PoolConfig = field(default_factory=PoolConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    checkability: CheckabilityConfig = field(default_factory=CheckabilityConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
_config: Optional[SpellServiceConfig] = None


def get_config() -> SpellServiceConfig:
    """Get the global spell service configuration."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def load_config(path: Optional[Path] = None) -> SpellServiceConfig:
    """Load configuration from file and environment."""
    config = SpellServiceConfig()
    path = Path(path) if path else CONFIG_FILE

    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            _apply_dict_to_config(config, file_config)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not load config file %s: %s", path, e)

    _apply_env_to_config(config)

    return config


def _apply_dict_to_config(config: SpellServiceConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: SpellServiceConfig):
    """Apply environment variables to config."""
    env_mappings = {
        'SPELLSERVICE_POOL_SIZE': ('pool', 'size', int),
        'SPELLSERVICE_POOL_TIMEOUT': ('pool', 'timeout_seconds', float),
        'SPELLSERVICE_CACHE_CAPACITY': ('cache', 'capacity', int),
        'SPELLSERVICE_SUGGESTION_THRESHOLD': ('suggestions', 'suggestion_threshold', float),
        'SPELLSERVICE_RECOMMENDED_THRESHOLD': ('suggestions', 'recommended_threshold', float),
        'SPELLSERVICE_BLOCK_OFFENSIVE': ('suggestions', 'block_offensive_words', _parse_bool),
        'SPELLSERVICE_MIN_LETTER_RATIO': ('checkability', 'min_letter_ratio', float),
        'SPELLSERVICE_DICTIONARY_BACKEND': ('dictionary', 'backend', str),
        'SPELLSERVICE_MAX_EDIT_DISTANCE': ('dictionary', 'max_edit_distance', int),
        'SPELLSERVICE_CUSTOM_DICTIONARY': ('dictionary', 'custom_dictionary', str),
        'SPELLSERVICE_USER_DICTIONARY': ('dictionary', 'user_dictionary', str),
        'SPELLSERVICE_LOG_LEVEL': ('logging', 'level', str),
        'SPELLSERVICE_LOG_FORMAT': ('logging', 'format', str),
        'SPELLSERVICE_LOG_TO_FILE': ('logging', 'to_file', _parse_bool),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                section_obj = getattr(config, section)
                setattr(section_obj, key, converter(value))
            except (ValueError, AttributeError) as e:
                logger.warning("Invalid env var %s=%s: %s", env_var, value, e)


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('pool.size') -> 2
    """
    obj = get_config()
    for part in key.split('.'):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default

    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('cache.capacity', 100)
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) != 2:
        raise ValueError(f"Key must be in format 'section.key': {key}")

    section_name, attr_name = parts

    if not hasattr(config, section_name):
        raise ValueError(f"Unknown config section: {section_name}")
    section = getattr(config, section_name)
    if not hasattr(section, attr_name):
        raise ValueError(f"Unknown config key: {attr_name}")
    setattr(section, attr_name, value)


def save_config(path: Optional[Path] = None):
    """Save current configuration to file."""
    path = Path(path) if path else CONFIG_FILE

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(get_config()), f, indent=2)


def reset_config():
    """Reset configuration to defaults."""
    global _config
    _config = SpellServiceConfig()
