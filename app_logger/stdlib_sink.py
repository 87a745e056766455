# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Sink that forwards records to the standard library logging module."""

import logging

from .message import AnnotatedMessage
from .severity import Severity
from .sink import LogSink


def logger_name(subsystem: str, category: str) -> str:
    """Dotted stdlib logger name for a (subsystem, category) pair.

    Empty parts are skipped; two empty parts select the root logger.
    """
    return ".".join(part for part in (subsystem, category) if part)


class StdlibSink(LogSink):
    """Sink backed by ``logging.getLogger("<subsystem>.<category>")``.

    Level filtering, handlers and formatting are whatever the application
    configured on the stdlib logging tree. Records carry ``subsystem``,
    ``category`` and ``privacy`` attributes for formatters and filters.
    """

    def __init__(self, reveal_private: bool = False):
        """Initialize stdlib sink.

        Args:
            reveal_private: Render private messages in clear text
        """
        self.reveal_private = reveal_private

    def emit(
        self,
        subsystem: str,
        category: str,
        level: Severity,
        message: AnnotatedMessage,
    ) -> None:
        stdlib_logger = logging.getLogger(logger_name(subsystem, category))
        stdlib_logger.log(
            int(level),
            message.render(self.reveal_private),
            extra={
                "subsystem": subsystem,
                "category": category,
                "privacy": message.privacy.value,
            },
        )
