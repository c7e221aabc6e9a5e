"""Audit sinks: log lines for running code, an in-memory list for tests."""

import logging
import threading

from contactbook.application.ports import AUDIT_REJECTED, AuditEvent

AUDIT_LOGGER_NAME = "contactbook.audit"


class LoggingAuditSink:
    """Writes each event as one line on the audit logger. Rejections go out at WARNING."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(AUDIT_LOGGER_NAME)

    def record(self, event: AuditEvent) -> None:
        level = logging.WARNING if event.action == AUDIT_REJECTED else logging.INFO
        details = " ".join(f"{k}={v}" for k, v in sorted(event.detail.items()))
        self._logger.log(
            level,
            "Contact %s: id=%s %s",
            event.action,
            event.contact_id if event.contact_id is not None else "-",
            details,
        )


class RecordingAuditSink:
    """Keeps every event in memory, in arrival order."""

    def __init__(self) -> None:
        self._events: list[AuditEvent] = []
        self._lock = threading.Lock()

    def record(self, event: AuditEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[AuditEvent]:
        with self._lock:
            return list(self._events)

    def actions(self) -> list[str]:
        return [e.action for e in self.events]
