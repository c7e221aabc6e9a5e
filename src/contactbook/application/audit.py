"""Fire-and-forget delivery of audit events."""

import logging

from contactbook.application.ports import AuditEvent, AuditSink

logger = logging.getLogger(__name__)


class NullAuditSink:
    """Discards every event."""

    def record(self, event: AuditEvent) -> None:
        return None


def emit(sink: AuditSink, event: AuditEvent) -> None:
    """Hand event to sink. A failing sink is logged and otherwise ignored."""
    try:
        sink.record(event)
    except Exception:
        logger.warning(
            "Audit sink %s failed on %s event", type(sink).__name__, event.action,
            exc_info=True,
        )
