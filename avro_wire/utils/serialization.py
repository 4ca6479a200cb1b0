"""
Serializer adapters for confluent-kafka clients.

Wrap a WireFormatCodec so it can be plugged into SerializingProducer
and DeserializingConsumer.
"""
from typing import Any, Optional

from confluent_kafka.serialization import (
    Deserializer,
    MessageField,
    SerializationContext,
    Serializer,
)

from avro_wire.codec import WireFormatCodec


def _is_key(ctx: Optional[SerializationContext]) -> bool:
    return ctx is not None and ctx.field == MessageField.KEY


class AvroWireSerializer(Serializer):
    """Serializer producing framed Avro bytes for one schema."""

    def __init__(self, codec: WireFormatCodec, schema_str: str):
        """
        Initialize serializer.

        Args:
            codec: Wire-format codec
            schema_str: Avro schema text registered for the target subject
        """
        self._codec = codec
        self._schema_str = schema_str

    def __call__(self, obj: Any, ctx: Optional[SerializationContext] = None) -> Optional[bytes]:
        """
        Serialize object to framed bytes.

        Args:
            obj: Value to serialize
            ctx: Serialization context carrying topic and key/value field

        Returns:
            Framed Avro bytes
        """
        if obj is None:
            return None
        if ctx is None:
            raise ValueError("SerializationContext with a topic is required")
        return self._codec.encode(ctx.topic, _is_key(ctx), self._schema_str, obj)


class AvroWireDeserializer(Deserializer):
    """Deserializer for framed Avro bytes."""

    def __init__(self, codec: WireFormatCodec):
        self._codec = codec

    def __call__(self, data: Optional[bytes], ctx: Optional[SerializationContext] = None) -> Any:
        """
        Deserialize framed bytes.

        Args:
            data: Framed Avro bytes
            ctx: Serialization context carrying topic and key/value field

        Returns:
            Decoded value
        """
        if data is None:
            return None
        if ctx is None:
            raise ValueError("SerializationContext with a topic is required")
        return self._codec.decode(ctx.topic, _is_key(ctx), data)
