# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Silent sink implementation for testing."""

from typing import Any

from .message import AnnotatedMessage
from .severity import Severity
from .sink import LogSink


class SilentSink(LogSink):
    """Sink that stores records in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Note: SilentSink does not filter by level - every record is captured.
    """

    def __init__(self, reveal_private: bool = False):
        """Initialize silent sink.

        Args:
            reveal_private: Store private text in the ``rendered`` field
        """
        self.reveal_private = reveal_private
        self.logs: list[dict[str, Any]] = []

    def emit(
        self,
        subsystem: str,
        category: str,
        level: Severity,
        message: AnnotatedMessage,
    ) -> None:
        """Store a record.

        Args:
            subsystem: Coarse-grained namespace of the record
            category: Fine-grained namespace within the subsystem
            level: Severity of the record
            message: Message text with its privacy annotation
        """
        self.logs.append(
            {
                "subsystem": subsystem,
                "category": category,
                "level": level,
                "message": message.text,
                "privacy": message.privacy,
                "rendered": message.render(self.reveal_private),
            }
        )

    def clear_logs(self) -> None:
        """Clear all stored records (useful for testing)."""
        self.logs.clear()

    def get_logs(self, level: "Severity | str | None" = None) -> list[dict[str, Any]]:
        """Get stored records, optionally filtered by level.

        Args:
            level: Optional severity to filter by

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        wanted = Severity.parse(level)
        return [log for log in self.logs if log["level"] is wanted]

    def has_log(self, message: str, level: "Severity | str | None" = None) -> bool:
        """Check if a specific log message exists.

        Args:
            message: Message to search for (substring match on the raw text)
            level: Optional severity to filter by

        Returns:
            True if message is found, False otherwise
        """
        return any(message in log["message"] for log in self.get_logs(level))
