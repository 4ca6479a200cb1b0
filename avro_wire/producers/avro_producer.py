"""
Kafka producer writing framed Avro records.
Encodes through a WireFormatCodec and tracks delivery results.
"""
from typing import Any, Callable, Dict, Optional

from confluent_kafka import Producer

from avro_wire.codec import WireFormatCodec
from avro_wire.config import KafkaConfig, get_config
from avro_wire.exceptions import CodecError
from avro_wire.utils import get_logger

logger = get_logger(__name__)

DELIVERY_LOG_INTERVAL = 1000


class AvroWireProducer:
    """
    Kafka producer for registry-framed Avro records.

    Schemas must already be registered under the topic's subjects;
    encoding never registers them.
    """

    def __init__(
        self,
        codec: WireFormatCodec,
        config: Optional[KafkaConfig] = None,
    ):
        """
        Initialize Kafka producer.

        Args:
            codec: Wire-format codec used for encoding
            config: Optional Kafka configuration
        """
        self._config = config or get_config().kafka
        self._codec = codec
        self._producer = Producer(self._config.producer_conf())

        self._delivery_count = 0
        self._error_count = 0

        logger.info(
            "Kafka producer initialized with bootstrap servers: %s",
            self._config.bootstrap_servers
        )

    def _delivery_callback(self, err, msg) -> None:
        """Count the delivery outcome of a framed Avro record."""
        if err is None:
            self._delivery_count += 1
            if self._delivery_count % DELIVERY_LOG_INTERVAL == 0:
                logger.debug(
                    "Delivered %d framed Avro records, %d failed",
                    self._delivery_count, self._error_count
                )
            return

        self._error_count += 1
        logger.error(
            "Avro record delivery to %s [%s] failed: %s",
            msg.topic(), msg.partition(), err
        )

    def produce(
        self,
        topic: str,
        value: Any,
        schema_str: str,
        key: Any = None,
        key_schema_str: Optional[str] = None,
        callback: Optional[Callable] = None,
    ) -> None:
        """
        Encode and produce a record.

        Args:
            topic: Target topic name
            value: Record value
            schema_str: Avro schema registered for the value subject
            key: Optional record key; str keys are sent as UTF-8 unless
                key_schema_str is given
            key_schema_str: Avro schema registered for the key subject
            callback: Optional delivery callback

        Raises:
            CodecError: If the key or value cannot be encoded
        """
        try:
            serialized_value = self._codec.encode(topic, False, schema_str, value)
            if key is None:
                serialized_key = None
            elif key_schema_str is not None:
                serialized_key = self._codec.encode(topic, True, key_schema_str, key)
            else:
                serialized_key = key.encode("utf-8") if isinstance(key, str) else key
        except CodecError as e:
            logger.error("Failed to encode record for %s: %s", topic, e)
            raise

        try:
            self._producer.produce(
                topic=topic,
                value=serialized_value,
                key=serialized_key,
                callback=callback or self._delivery_callback,
            )
        except BufferError:
            logger.warning("Producer buffer full, waiting...")
            self._producer.poll(1)
            # Retry once
            self._producer.produce(
                topic=topic,
                value=serialized_value,
                key=serialized_key,
                callback=callback or self._delivery_callback,
            )

        # Trigger delivery callbacks
        self._producer.poll(0)

    def flush(self, timeout: float = 10.0) -> int:
        """
        Flush pending messages.

        Args:
            timeout: Maximum time to wait in seconds

        Returns:
            Number of messages still in queue
        """
        remaining = self._producer.flush(timeout)
        if remaining > 0:
            logger.warning("%d messages still in queue after flush", remaining)
        return remaining

    def close(self) -> None:
        """Flush and report delivery totals."""
        logger.info("Shutting down Kafka producer...")
        remaining = self.flush(timeout=30.0)
        if remaining == 0:
            logger.info(
                "Producer shutdown complete. Delivered: %d, Errors: %d",
                self._delivery_count, self._error_count
            )
        else:
            logger.warning(
                "Producer shutdown with %d messages remaining", remaining
            )

    @property
    def stats(self) -> Dict[str, int]:
        """Get producer statistics."""
        return {
            "delivered": self._delivery_count,
            "errors": self._error_count,
        }
