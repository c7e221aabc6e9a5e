"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.audit import LoggingAuditSink, RecordingAuditSink
from contactbook.infrastructure.memory_repository import (
    MAX_CAPACITY,
    InMemoryContactRepository,
)
from contactbook.infrastructure.phone import format_phone

__all__ = [
    "MAX_CAPACITY",
    "InMemoryContactRepository",
    "LoggingAuditSink",
    "RecordingAuditSink",
    "format_phone",
]
