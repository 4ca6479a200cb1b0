"""
Wire-format codec.

Decodes and encodes Kafka messages framed as magic byte, schema version
and Avro payload, resolving schemas through a registry.
"""
from typing import Any, Optional

from avro_wire.avro import AvroCodecProvider
from avro_wire.cache import CodecCache, SubjectVersionKey
from avro_wire.exceptions import DecodeError, EncodeError, SchemaResolutionError
from avro_wire.naming import SubjectNameStrategy, topic_name_strategy
from avro_wire.registry import SchemaRegistry
from avro_wire.wire import pack_frame, unpack_frame


class WireFormatCodec:
    """
    Registry-backed codec for framed Avro messages.

    The subject naming strategy is applied identically on both paths, so
    a frame encoded for (topic, is_key) decodes for the same pair.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        provider: Optional[AvroCodecProvider] = None,
        naming_strategy: SubjectNameStrategy = topic_name_strategy,
        cache: Optional[CodecCache] = None,
    ):
        """
        Initialize codec.

        Args:
            registry: Schema registry client
            provider: Codec provider, used when no cache is given
            naming_strategy: Maps (topic, is_key) to a subject
            cache: Optional shared codec cache
        """
        self._registry = registry
        self._naming_strategy = naming_strategy
        # An empty cache is falsy, compare against None
        self._cache = cache if cache is not None else CodecCache(registry, provider)

    @property
    def cache(self) -> CodecCache:
        return self._cache

    def subject_for(self, topic: str, is_key: bool) -> str:
        """Return the registry subject for a topic key or value."""
        return self._naming_strategy(topic, is_key)

    def decode(self, topic: str, is_key: bool, data: bytes) -> Any:
        """
        Decode a framed message.

        Args:
            topic: Topic the message was read from
            is_key: True for message keys, False for values
            data: Raw framed bytes

        Returns:
            Decoded Python value

        Raises:
            InvalidWireFormatError: If the frame is short or has a bad magic byte
            SchemaResolutionError: If the schema version cannot be fetched
            SchemaCompileError: If the fetched schema does not compile
            DecodeError: If the payload does not match the schema
        """
        frame = unpack_frame(data)
        key = SubjectVersionKey(self.subject_for(topic, is_key), frame.version)
        codec = self._cache.resolve(key)

        try:
            value, _ = codec.decode(frame.payload)
        except Exception as e:
            raise DecodeError(key.subject, key.version, str(e) or type(e).__name__) from e
        return value

    def encode(self, topic: str, is_key: bool, schema_str: str, value: Any) -> bytes:
        """
        Encode a value into a framed message.

        The schema must already be registered under the topic's subject;
        this path never registers schemas.

        Args:
            topic: Destination topic
            is_key: True for message keys, False for values
            schema_str: Avro schema text the value conforms to
            value: Python value to encode

        Returns:
            Framed message bytes

        Raises:
            SchemaResolutionError: If the schema is not registered or the lookup fails
            SchemaCompileError: If the registered schema does not compile
            EncodeError: If the value does not conform to the schema
        """
        subject = self.subject_for(topic, is_key)
        try:
            version = self._registry.get_version_for(subject, schema_str)
        except Exception as e:
            raise SchemaResolutionError(subject, schema=schema_str, reason=str(e)) from e

        key = SubjectVersionKey(subject, version)
        codec = self._cache.resolve(key)

        try:
            payload = codec.encode(value)
        except Exception as e:
            raise EncodeError(key.subject, key.version, str(e) or type(e).__name__) from e
        return pack_frame(key.version, payload)
