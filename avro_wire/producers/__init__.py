"""
Kafka producers for framed Avro records.
"""
from .avro_producer import AvroWireProducer

__all__ = [
    "AvroWireProducer",
]
