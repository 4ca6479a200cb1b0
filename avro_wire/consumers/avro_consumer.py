"""
Kafka consumer decoding framed Avro records.
Polls subscribed topics and hands decoded records to a handler.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from confluent_kafka import Consumer, KafkaError

from avro_wire.codec import WireFormatCodec
from avro_wire.config import KafkaConfig, get_config
from avro_wire.exceptions import CodecError, ConsumerError
from avro_wire.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DecodedRecord:
    """A consumed record with its decoded value."""
    topic: str
    partition: int
    offset: int
    key: Any
    value: Any


RecordHandler = Callable[[DecodedRecord], None]


class AvroWireConsumer:
    """
    Consumer that decodes record values through a WireFormatCodec.

    Records that fail to decode are logged and skipped; the offset is
    still committed so one bad record does not block the partition.
    """

    def __init__(
        self,
        codec: WireFormatCodec,
        config: Optional[KafkaConfig] = None,
        topics: Optional[List[str]] = None,
        decode_keys: bool = False,
    ):
        """
        Initialize consumer.

        Args:
            codec: Wire-format codec used for decoding
            config: Optional Kafka configuration
            topics: Topics to subscribe to (defaults to configured topics)
            decode_keys: Decode record keys as framed Avro too
        """
        self._config = config or get_config().kafka
        self._codec = codec
        self._topics = topics or self._config.topics_list
        self._decode_keys = decode_keys

        self._consumer = Consumer(self._config.consumer_conf())
        self._consumer.subscribe(self._topics)

        self._running = False
        self._message_count = 0
        self._decode_errors = 0

        logger.info("Subscribed to topics: %s", ", ".join(self._topics))

    def _decode(self, msg) -> DecodedRecord:
        key = msg.key()
        if self._decode_keys and key is not None:
            key = self._codec.decode(msg.topic(), True, key)
        value = msg.value()
        if value is not None:
            value = self._codec.decode(msg.topic(), False, value)
        return DecodedRecord(
            topic=msg.topic(),
            partition=msg.partition(),
            offset=msg.offset(),
            key=key,
            value=value,
        )

    def poll_once(self, handler: RecordHandler, timeout: Optional[float] = None) -> bool:
        """
        Poll a single record and dispatch it.

        Args:
            handler: Callback receiving the decoded record
            timeout: Poll timeout in seconds (defaults to config value)

        Returns:
            True if a record was handed to the handler

        Raises:
            ConsumerError: If Kafka reports a fatal error or all brokers are down
        """
        msg = self._consumer.poll(self._config.poll_timeout if timeout is None else timeout)
        if msg is None:
            return False

        err = msg.error()
        if err is not None:
            if err.code() == KafkaError._PARTITION_EOF:
                logger.info(
                    "Reached end of %s [%d] at offset %d",
                    msg.topic(), msg.partition(), msg.offset()
                )
                return False
            if err.fatal():
                raise ConsumerError(f"Fatal consumer error: {err}", topic=msg.topic())
            # Not fatal in librdkafka, but polling further cannot make progress
            if err.code() == KafkaError._ALL_BROKERS_DOWN:
                raise ConsumerError(f"All brokers down: {err}", topic=msg.topic())
            logger.error("Consumer error: %s", err)
            return False

        self._message_count += 1
        try:
            record = self._decode(msg)
        except CodecError as e:
            self._decode_errors += 1
            logger.error(
                "Failed to decode record %s [%d] @ %d: %s",
                msg.topic(), msg.partition(), msg.offset(), e
            )
            record = None

        if record is not None:
            handler(record)

        if not self._config.enable_auto_commit:
            self._consumer.commit(message=msg, asynchronous=False)
        return record is not None

    def run(self, handler: RecordHandler, max_messages: Optional[int] = None) -> None:
        """
        Poll until stop() is called or max_messages records were handled.

        Args:
            handler: Callback receiving each decoded record
            max_messages: Optional limit on handled records
        """
        self._running = True
        handled = 0
        try:
            while self._running:
                if self.poll_once(handler):
                    handled += 1
                    if max_messages is not None and handled >= max_messages:
                        break
        finally:
            self._running = False

    def stop(self) -> None:
        """Request the poll loop to exit."""
        self._running = False

    def close(self) -> None:
        """Close the underlying consumer."""
        logger.info(
            "Closing consumer. Consumed: %d, Decode errors: %d",
            self._message_count, self._decode_errors
        )
        self._consumer.close()

    @property
    def stats(self) -> Dict[str, Any]:
        """Get consumer statistics."""
        return {
            "consumed": self._message_count,
            "decode_errors": self._decode_errors,
            "cache": self._codec.cache.stats,
        }
