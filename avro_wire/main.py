"""
Main entry point for the Avro wire consumer.
Reads framed Avro records from Kafka and logs the decoded values.
"""
import signal
import sys
from typing import List, Optional

from avro_wire.codec import WireFormatCodec
from avro_wire.config import get_config
from avro_wire.consumers import AvroWireConsumer, DecodedRecord
from avro_wire.exceptions import ConfigurationError
from avro_wire.registry import ConfluentSchemaRegistry
from avro_wire.utils import get_logger

logger = get_logger(__name__)


def log_record(record: DecodedRecord) -> None:
    """Log a decoded record."""
    logger.info(
        "%s [%d] @ %d: %s",
        record.topic, record.partition, record.offset, record.value
    )


def run_consumer(topics: Optional[List[str]] = None) -> None:
    """
    Consume and log framed Avro records until interrupted.

    Args:
        topics: Topics to consume (defaults to configured topics)
    """
    config = get_config()
    target_topics = topics or config.kafka.topics_list
    if not target_topics:
        raise ConfigurationError("No topics configured", config_key="KAFKA_TOPICS")

    logger.info("=" * 60)
    logger.info("Avro Wire Consumer")
    logger.info("=" * 60)
    logger.info("Schema registry: %s", config.registry.url)
    logger.info("Topics: %s", ", ".join(target_topics))
    logger.info("=" * 60)

    codec = WireFormatCodec(ConfluentSchemaRegistry(config=config.registry))
    consumer = AvroWireConsumer(codec, config=config.kafka, topics=target_topics)

    def handle_signal(signum, frame) -> None:
        logger.info("Received signal %s, stopping consumer", signal.Signals(signum).name)
        consumer.stop()

    # Setup signal handlers
    previous = {
        sig: signal.signal(sig, handle_signal)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }

    try:
        consumer.run(log_record)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
    finally:
        for sig, handler in previous.items():
            if handler is not None:
                signal.signal(sig, handler)
        consumer.close()
        logger.info("Final stats: %s", consumer.stats)


def main() -> None:
    """Main entry point."""
    try:
        run_consumer()
    except Exception as e:
        logger.error("Consumer failed: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
