# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Logging facade bound to a subsystem and category."""

from typing import Optional

from .defaults import Defaults
from .factory import get_default_sink
from .handle import LoggerHandle
from .message import AnnotatedMessage
from .severity import Privacy, Severity
from .sink import LogSink


class AppLogger:
    """Logs string messages at a severity with a public/private annotation.

    Each instance owns one ``LoggerHandle``. It keeps no other state, so one
    instance can be shared across threads for the process lifetime or built
    per call site.

    Example:
        >>> logger = AppLogger(subsystem="com.example.shop", category="checkout")
        >>> logger.log("Cart loaded", level=Severity.INFO)
        >>> logger.log("Card ending 4242", is_private=True)
    """

    __slots__ = ("_handle",)

    def __init__(
        self,
        subsystem: Optional[str] = None,
        category: Optional[str] = None,
        sink: Optional[LogSink] = None,
    ):
        """Create an ``AppLogger`` instance.

        Args:
            subsystem: Organizes large topic areas, such as one per process.
                Defaults to the host package identifier or "AppLogger".
            category: Distinguishes parts of a subsystem, such as model code
                and user-interface code. Defaults to "default".
            sink: Destination for records. Defaults to the process-wide
                default sink.
        """
        self._handle = LoggerHandle(
            subsystem=Defaults.subsystem if subsystem is None else subsystem,
            category=Defaults.category if category is None else category,
            sink=get_default_sink() if sink is None else sink,
        )

    def __repr__(self) -> str:
        return f"AppLogger(subsystem={self.subsystem!r}, category={self.category!r})"

    @property
    def handle(self) -> LoggerHandle:
        return self._handle

    @property
    def subsystem(self) -> str:
        return self._handle.subsystem

    @property
    def category(self) -> str:
        return self._handle.category

    def log(
        self,
        message: str,
        level: "Severity | str" = Severity.DEBUG,
        is_private: bool = Defaults.is_private,
    ) -> None:
        """Log a message at the given level.

        Args:
            message: The string to be logged; empty strings are logged as is
            level: Severity or severity name; default is DEBUG
            is_private: True marks the message private (redacted in
                unprivileged viewers), False public. Default is False.

        Raises:
            ValueError: If level is a name that is not a known severity
        """
        annotated = AnnotatedMessage(message, Privacy.from_flag(is_private))
        self._handle.emit(Severity.parse(level), annotated)

    def debug(self, message: str, is_private: bool = Defaults.is_private) -> None:
        self.log(message, Severity.DEBUG, is_private)

    def info(self, message: str, is_private: bool = Defaults.is_private) -> None:
        self.log(message, Severity.INFO, is_private)

    def notice(self, message: str, is_private: bool = Defaults.is_private) -> None:
        self.log(message, Severity.NOTICE, is_private)

    def error(self, message: str, is_private: bool = Defaults.is_private) -> None:
        self.log(message, Severity.ERROR, is_private)

    def fault(self, message: str, is_private: bool = Defaults.is_private) -> None:
        self.log(message, Severity.FAULT, is_private)
