"""
Single-schema encoder for producers writing one schema.
"""
from typing import Any, Optional

from avro_wire.avro import AvroCodecProvider
from avro_wire.exceptions import EncodeError, SchemaCompileError, SchemaNotRegisteredError
from avro_wire.registry import SchemaRegistry


class SingleSchemaEncoder:
    """
    Encoder bound to one subject, version and compiled schema.

    The registry is consulted once at construction. `encode` returns the
    bare Avro payload without the wire header; callers that publish to
    Kafka frame it with `avro_wire.wire.pack_frame(encoder.version, payload)`.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        auto_register: bool,
        subject: str,
        schema_str: str,
        provider: Optional[AvroCodecProvider] = None,
    ):
        """
        Initialize encoder.

        Args:
            registry: Schema registry client
            auto_register: Register the schema if True, otherwise require
                an existing registration
            subject: Registry subject
            schema_str: Avro schema text

        Raises:
            SchemaNotRegisteredError: If auto_register is False and the
                schema is not registered under subject
            SchemaCompileError: If the schema does not compile
        """
        if auto_register:
            version = registry.register_new_schema(subject, schema_str)
        else:
            registered, version = registry.is_registered(subject, schema_str)
            if not registered:
                raise SchemaNotRegisteredError(subject, schema_str)

        provider = provider or AvroCodecProvider()
        try:
            codec = provider.compile(schema_str)
        except Exception as e:
            raise SchemaCompileError(str(e), subject=subject, version=version) from e

        self._subject = subject
        self._version = version
        self._codec = codec

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def version(self) -> int:
        return self._version

    @property
    def schema_str(self) -> str:
        return self._codec.schema_str

    def encode(self, value: Any) -> bytes:
        """
        Serialize value with the bound schema.

        Raises:
            EncodeError: If value does not conform to the schema
        """
        try:
            return self._codec.encode(value)
        except Exception as e:
            raise EncodeError(self._subject, self._version, str(e) or type(e).__name__) from e
