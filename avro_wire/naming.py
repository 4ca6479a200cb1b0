"""
Subject naming strategies.

A strategy maps a Kafka topic and a key/value flag to the registry
subject holding the schema. Producers and consumers of a topic must use
the same strategy, otherwise frames written on one side resolve to a
different subject on the other.
"""
from typing import Callable

SubjectNameStrategy = Callable[[str, bool], str]


def topic_name_strategy(topic: str, is_key: bool) -> str:
    """Register key schemas under `topic-key` and value schemas under `topic-value`."""
    suffix = "-key" if is_key else "-value"
    return topic + suffix


def topic_only_strategy(topic: str, is_key: bool) -> str:
    """Use the topic itself as subject for both keys and values."""
    return topic
