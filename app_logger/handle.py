# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Logger handle bound to one (subsystem, category) destination."""

from .message import AnnotatedMessage
from .severity import Severity
from .sink import LogSink


class LoggerHandle:
    """Immutable binding of a subsystem and category to a sink.

    Any strings are accepted, including empty ones; how an unnamed channel
    is presented is up to the sink. A different destination needs a new
    handle.
    """

    __slots__ = ("_subsystem", "_category", "_sink")

    def __init__(self, subsystem: str, category: str, sink: LogSink):
        object.__setattr__(self, "_subsystem", subsystem)
        object.__setattr__(self, "_category", category)
        object.__setattr__(self, "_sink", sink)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"LoggerHandle(subsystem={self._subsystem!r}, category={self._category!r})"

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @property
    def category(self) -> str:
        return self._category

    @property
    def sink(self) -> LogSink:
        return self._sink

    def emit(self, level: Severity, message: AnnotatedMessage) -> None:
        """Forward a record to the sink at the given severity."""
        self._sink.emit(self._subsystem, self._category, level, message)
