# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Stdout sink with structured JSON output."""

import json
import sys
from datetime import datetime, timezone

from .message import AnnotatedMessage
from .severity import Severity
from .sink import LogSink


class StdoutSink(LogSink):
    """Sink that outputs one JSON object per record to stdout."""

    def __init__(self, level: "Severity | str" = Severity.DEBUG, reveal_private: bool = False):
        """Initialize stdout sink.

        Args:
            level: Minimum severity written (DEBUG, INFO, NOTICE, ERROR, FAULT)
            reveal_private: Render private messages in clear text

        Raises:
            ValueError: If level is not a known severity
        """
        self.level = Severity.parse(level)
        self.reveal_private = reveal_private

    def emit(
        self,
        subsystem: str,
        category: str,
        level: Severity,
        message: AnnotatedMessage,
    ) -> None:
        """Format and output a record.

        Args:
            subsystem: Coarse-grained namespace of the record
            category: Fine-grained namespace within the subsystem
            level: Severity of the record
            message: Message text with its privacy annotation
        """
        if level < self.level:
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level.name,
            "subsystem": subsystem,
            "category": category,
            "privacy": message.privacy.value,
            "message": message.render(self.reveal_private),
        }

        try:
            json_output = json.dumps(log_entry)
            print(json_output, file=sys.stdout, flush=True)
        except Exception as e:
            # Fallback to plain text if JSON serialization fails
            print(
                f"{level.name}: {log_entry['message']} (JSON serialization failed: {e})",
                file=sys.stderr,
                flush=True,
            )
