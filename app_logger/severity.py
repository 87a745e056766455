# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Severity levels and privacy annotations."""

import logging
from enum import Enum, IntEnum

NOTICE_LEVEL = 25

logging.addLevelName(NOTICE_LEVEL, "NOTICE")


class Severity(IntEnum):
    """Importance of a log record.

    Values are the stdlib ``logging`` level numbers used when emitting, so
    ordering is the same one the underlying facility filters on.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = NOTICE_LEVEL
    ERROR = logging.ERROR
    FAULT = logging.CRITICAL

    # The host facility's default level is notice
    DEFAULT = NOTICE

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Coerce a Severity, a stdlib level number or a case-insensitive level name.

        Args:
            value: Severity member, level number such as ``logging.ERROR``,
                or name such as "info" or "fault"

        Returns:
            Matching Severity

        Raises:
            ValueError: If the value is not a known severity
        """
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, int):
                return cls(value)
            return cls[str(value).strip().upper()]
        except (KeyError, ValueError):
            raise ValueError(
                f"Invalid severity: {value}. Must be one of {[member.name for member in cls]}"
            ) from None

    @property
    def syslog_priority(self) -> str:
        """Syslog priority name for this severity."""
        return _SYSLOG_PRIORITIES[self]


_SYSLOG_PRIORITIES = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.NOTICE: "notice",
    Severity.ERROR: "err",
    Severity.FAULT: "crit",
}


class Privacy(Enum):
    """Rendering directive for message content in log viewers."""

    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def from_flag(cls, is_private: bool) -> "Privacy":
        """Map a boolean privacy flag to a rendering mode."""
        return cls.PRIVATE if is_private else cls.PUBLIC
