# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Syslog sink writing to the host's system log daemon."""

import logging
from logging.handlers import SysLogHandler

from .message import AnnotatedMessage
from .severity import Severity
from .sink import LogSink
from .stdlib_sink import logger_name

DEFAULT_ADDRESS = "/dev/log"


class _DroppingSysLogHandler(SysLogHandler):
    """SysLogHandler that drops records the daemon cannot accept."""

    def handleError(self, record: logging.LogRecord) -> None:
        # An unreachable daemon means no visible log line, not a traceback
        pass


class SyslogSink(LogSink):
    """Sink that sends records to syslog as ``subsystem[category]: message``.

    If the daemon is unreachable the record is dropped without output;
    nothing reaches the caller or stderr.
    """

    def __init__(
        self,
        address: "str | tuple[str, int]" = DEFAULT_ADDRESS,
        facility: int = SysLogHandler.LOG_USER,
        reveal_private: bool = False,
    ):
        """Initialize syslog sink.

        Args:
            address: Unix socket path or (host, port) of the syslog daemon
            facility: Syslog facility code
            reveal_private: Render private messages in clear text
        """
        self.address = address
        self.reveal_private = reveal_private

        self._handler = _DroppingSysLogHandler(address=address, facility=facility)
        self._handler.setFormatter(logging.Formatter("%(subsystem)s[%(category)s]: %(message)s"))
        # Priorities are looked up by level name
        self._handler.priority_map = {
            logging.getLevelName(int(severity)): severity.syslog_priority for severity in Severity
        }

    def emit(
        self,
        subsystem: str,
        category: str,
        level: Severity,
        message: AnnotatedMessage,
    ) -> None:
        record = logging.LogRecord(
            name=logger_name(subsystem, category) or "root",
            level=int(level),
            pathname=__file__,
            lineno=0,
            msg=message.render(self.reveal_private),
            args=None,
            exc_info=None,
        )
        record.subsystem = subsystem
        record.category = category
        record.privacy = message.privacy.value
        self._handler.handle(record)

    def close(self) -> None:
        """Close the underlying syslog socket."""
        self._handler.close()
