"""
Schema registry adapter over the Confluent Schema Registry client.
"""
from typing import Optional, Tuple

from confluent_kafka.schema_registry import Schema, SchemaRegistryClient
from confluent_kafka.schema_registry.error import SchemaRegistryError

from avro_wire.config import RegistryConfig, get_config
from avro_wire.registry.base import SchemaRegistry

AVRO = "AVRO"


class ConfluentSchemaRegistry(SchemaRegistry):
    """
    SchemaRegistry backed by `confluent_kafka.schema_registry`.

    Registry errors propagate as SchemaRegistryError, except a 404 from
    lookup in `is_registered`, which is reported as not registered.
    """

    def __init__(
        self,
        client: Optional[SchemaRegistryClient] = None,
        config: Optional[RegistryConfig] = None,
    ):
        """
        Initialize adapter.

        Args:
            client: Optional pre-built registry client
            config: Optional registry configuration, used when no client is given
        """
        if client is None:
            config = config or get_config().registry
            client = SchemaRegistryClient(config.to_client_conf())
        self._client = client

    @property
    def client(self) -> SchemaRegistryClient:
        return self._client

    def is_registered(self, subject: str, schema_str: str) -> Tuple[bool, Optional[int]]:
        try:
            registered = self._client.lookup_schema(subject, Schema(schema_str, AVRO))
        except SchemaRegistryError as e:
            if e.http_status_code == 404:
                return False, None
            raise
        return True, registered.version

    def register_new_schema(self, subject: str, schema_str: str) -> int:
        schema = Schema(schema_str, AVRO)
        # register_schema returns the global id, the frame carries the version
        self._client.register_schema(subject, schema)
        return self._client.lookup_schema(subject, schema).version

    def get_version_for(self, subject: str, schema_str: str) -> int:
        return self._client.lookup_schema(subject, Schema(schema_str, AVRO)).version

    def get_schema_for(self, subject: str, version: int) -> str:
        return self._client.get_version(subject, version).schema.schema_str
