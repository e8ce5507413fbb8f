"""Ports consumed by the chat data store."""

from chat.domain.chat.ports.persistence_sink import PersistenceSink

__all__ = ["PersistenceSink"]
