"""
Application configuration management.
Loads settings from environment variables with sensible defaults.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from os import getenv
from typing import Any, Dict, List


@dataclass(frozen=True)
class RegistryConfig:
    """Schema Registry client configuration."""
    url: str = field(
        default_factory=lambda: getenv("SCHEMA_REGISTRY_URL", "http://localhost:8081")
    )
    cache_capacity: int = 1000  # schemas cached by the HTTP client
    timeout: int = 10  # seconds

    def to_client_conf(self) -> Dict[str, Any]:
        """Return configuration dict for SchemaRegistryClient."""
        return {
            "url": self.url,
            "cache.capacity": self.cache_capacity,
            "timeout": self.timeout,
        }


@dataclass(frozen=True)
class KafkaConfig:
    """Kafka consumer and producer configuration."""
    bootstrap_servers: str = field(
        default_factory=lambda: getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092")
    )
    group_id: str = field(
        default_factory=lambda: getenv("KAFKA_GROUP_ID", "avro-wire")
    )
    topics: str = field(
        default_factory=lambda: getenv("KAFKA_TOPICS", "test")
    )
    auto_offset_reset: str = "earliest"
    enable_auto_commit: bool = False
    acks: str = "all"
    linger_ms: int = 10
    poll_timeout: float = 1.0  # seconds

    @property
    def topics_list(self) -> List[str]:
        """Return topics as list."""
        return [t.strip() for t in self.topics.split(",") if t.strip()]

    def consumer_conf(self) -> Dict[str, Any]:
        """Return configuration dict for confluent_kafka.Consumer."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "group.id": self.group_id,
            "auto.offset.reset": self.auto_offset_reset,
            "enable.auto.commit": self.enable_auto_commit,
        }

    def producer_conf(self) -> Dict[str, Any]:
        """Return configuration dict for confluent_kafka.Producer."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "linger.ms": self.linger_ms,
            "client.id": "avro-wire-producer",
        }


@dataclass(frozen=True)
class AppConfig:
    """Application configuration container."""
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    log_level: str = field(
        default_factory=lambda: getenv("LOG_LEVEL", "INFO")
    )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get singleton application configuration."""
    return AppConfig()
