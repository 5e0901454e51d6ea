"""Logging helpers for escapers.

Every record an escaper emits names the escaper configuration that produced
it and, when the caller supplied one, a correlation ID. Records go through
the standard library ``logging`` tree; the package installs no handlers.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Logger bound to one escaper and an optional correlation ID.

    Records carry ``component`` (``escaper.<name>`` when bound to an escaper),
    ``escaper`` and ``correlation_id`` attributes for filters and formatters.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        escaper: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.escaper = escaper
        self.component = f"escaper.{escaper}" if escaper else name.rsplit('.', 1)[-1]

    def _with_context(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        context = dict(extra or {})
        context.setdefault("escaper", self.escaper)
        context["component"] = self.component
        context["correlation_id"] = self.correlation_id
        return context

    def is_debug_enabled(self) -> bool:
        """Return True when DEBUG records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.debug(message, extra=self._with_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.warning(message, extra=self._with_context(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    escaper: Optional[str] = None
) -> CorrelationLogger:
    """Get a logger bound to an escaper.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        escaper: Name of the escaper configuration emitting records

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, escaper)
