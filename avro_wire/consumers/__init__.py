"""
Kafka consumers for framed Avro records.
"""
from .avro_consumer import (
    AvroWireConsumer,
    DecodedRecord,
    RecordHandler,
)

__all__ = [
    "AvroWireConsumer",
    "DecodedRecord",
    "RecordHandler",
]
