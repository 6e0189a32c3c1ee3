"""
UAsset Outline Configuration Module

Loads and provides access to configuration from outline_config.yaml.
"""

import os
from typing import List, Optional
from dataclasses import dataclass, field

import yaml


@dataclass
class DecoderConfig:
    """Package decoder configuration."""
    strict_booleans: bool = True
    walk_blueprints: bool = True
    blueprint_classes: List[str] = field(default_factory=lambda: ['Blueprint'])


@dataclass
class ServerConfig:
    """HTTP outline service configuration."""
    host: str = '0.0.0.0'
    port: int = 8080
    max_upload_bytes: int = 64 * 1024 * 1024


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = 'INFO'


@dataclass
class OutlineConfig:
    """Complete configuration."""
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global config instance
_config: Optional[OutlineConfig] = None


def get_config_path() -> str:
    """Get the path to the bundled config file."""
    return os.path.join(os.path.dirname(__file__), 'outline_config.yaml')


def load_config(config_path: Optional[str] = None) -> OutlineConfig:
    """
    Load configuration from a YAML file.

    Missing files and missing keys fall back to the dataclass defaults.

    Args:
        config_path: Path to config file (default: outline_config.yaml in this directory)

    Returns:
        OutlineConfig instance
    """
    global _config

    if config_path is None:
        config_path = get_config_path()

    config = OutlineConfig()

    if os.path.exists(config_path):
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        # Decoder settings
        dec_data = data.get('decoder', {})
        if dec_data:
            config.decoder.strict_booleans = bool(
                dec_data.get('strict_booleans', config.decoder.strict_booleans))
            config.decoder.walk_blueprints = bool(
                dec_data.get('walk_blueprints', config.decoder.walk_blueprints))
            classes = dec_data.get('blueprint_classes')
            if classes:
                config.decoder.blueprint_classes = [str(c) for c in classes]

        # Server settings
        srv_data = data.get('server', {})
        if srv_data:
            config.server.host = srv_data.get('host', config.server.host)
            config.server.port = int(srv_data.get('port', config.server.port))
            config.server.max_upload_bytes = int(
                srv_data.get('max_upload_bytes', config.server.max_upload_bytes))

        # Logging settings
        log_data = data.get('logging', {})
        if log_data:
            config.logging.level = str(log_data.get('level', config.logging.level)).upper()

    _config = config
    return config


def get_config() -> OutlineConfig:
    """
    Get the current configuration.

    Loads from file if not already loaded.
    """
    global _config
    if _config is None:
        load_config()
    return _config


def config_to_dict(config: Optional[OutlineConfig] = None) -> dict:
    """
    Convert OutlineConfig to dictionary for JSON serialization.

    Args:
        config: OutlineConfig to convert (uses global if None)

    Returns:
        Dictionary representation of config
    """
    if config is None:
        config = get_config()

    return {
        'decoder': {
            'strict_booleans': config.decoder.strict_booleans,
            'walk_blueprints': config.decoder.walk_blueprints,
            'blueprint_classes': list(config.decoder.blueprint_classes),
        },
        'server': {
            'host': config.server.host,
            'port': config.server.port,
            'max_upload_bytes': config.server.max_upload_bytes,
        },
        'logging': {
            'level': config.logging.level,
        },
    }


__all__ = [
    'OutlineConfig',
    'DecoderConfig',
    'ServerConfig',
    'LoggingConfig',
    'load_config',
    'get_config',
    'get_config_path',
    'config_to_dict',
]
