"""
Configuration management for the Avro wire codec.
"""
from .settings import (
    AppConfig,
    RegistryConfig,
    KafkaConfig,
    get_config,
)

__all__ = [
    "AppConfig",
    "RegistryConfig",
    "KafkaConfig",
    "get_config",
]
