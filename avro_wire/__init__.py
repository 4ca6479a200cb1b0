"""
Avro Wire - Schema Registry framed Avro codec for Kafka.

This package provides:
- Wire-format codec (magic byte, schema version, Avro payload)
- Thread-safe codec resolution cache keyed by subject and version
- Single-schema encoder for producers
- Schema registry adapters and Kafka consumer/producer wrappers
"""

__version__ = "1.0.0"

from avro_wire.cache import CodecCache, SubjectVersionKey
from avro_wire.codec import WireFormatCodec
from avro_wire.encoder import SingleSchemaEncoder
from avro_wire.exceptions import (
    CodecError,
    InvalidWireFormatError,
    FrameTooShortError,
    SchemaResolutionError,
    SchemaNotRegisteredError,
    SchemaCompileError,
    DecodeError,
    EncodeError,
)
from avro_wire.naming import topic_name_strategy, topic_only_strategy

__all__ = [
    "CodecCache",
    "SubjectVersionKey",
    "WireFormatCodec",
    "SingleSchemaEncoder",
    "CodecError",
    "InvalidWireFormatError",
    "FrameTooShortError",
    "SchemaResolutionError",
    "SchemaNotRegisteredError",
    "SchemaCompileError",
    "DecodeError",
    "EncodeError",
    "topic_name_strategy",
    "topic_only_strategy",
    "__version__",
]
