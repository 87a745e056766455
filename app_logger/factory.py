# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Factory functions for creating log sinks."""

import logging
import os
from typing import Optional

from .severity import Severity
from .silent_sink import SilentSink
from .sink import LogSink
from .stdlib_sink import StdlibSink
from .stdout_sink import StdoutSink
from .syslog_sink import DEFAULT_ADDRESS, SyslogSink

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes"}

_default_sink: Optional[LogSink] = None


def _default(value: Optional[str], env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def _reveal_private_from_env() -> bool:
    return os.getenv("APP_LOGGER_REVEAL_PRIVATE", "").strip().lower() in _TRUE_VALUES


def create_sink(
    sink_type: Optional[str] = None,
    level: "Severity | str | None" = None,
    reveal_private: Optional[bool] = None,
) -> LogSink:
    """Factory function to create a log sink.

    Args:
        sink_type: Type of sink to create. Options: "stdlib", "stdout",
            "silent", "syslog". Defaults to APP_LOGGER_SINK env or "stdlib".
        level: Minimum severity for the stdout sink. Defaults to
            APP_LOGGER_LEVEL env or "DEBUG".
        reveal_private: Render private messages in clear text. Defaults to
            APP_LOGGER_REVEAL_PRIVATE env ("1", "true" or "yes").

    Returns:
        LogSink instance

    Raises:
        ValueError: If sink_type or level is not recognized

    Example:
        >>> # Bridge into the stdlib logging tree
        >>> sink = create_sink()
        >>>
        >>> # JSON lines on stdout, INFO and above
        >>> sink = create_sink(sink_type="stdout", level="INFO")
        >>>
        >>> # In-memory sink for testing
        >>> sink = create_sink(sink_type="silent")
    """
    sink_type = _default(sink_type, "APP_LOGGER_SINK", "stdlib").strip().lower()
    if reveal_private is None:
        reveal_private = _reveal_private_from_env()

    if sink_type == "stdlib":
        return StdlibSink(reveal_private=reveal_private)
    elif sink_type == "stdout":
        if not isinstance(level, Severity):
            level = _default(level, "APP_LOGGER_LEVEL", "DEBUG")
        return StdoutSink(level=level, reveal_private=reveal_private)
    elif sink_type == "silent":
        return SilentSink(reveal_private=reveal_private)
    elif sink_type == "syslog":
        return _create_syslog_sink(reveal_private)
    else:
        raise ValueError(
            f"Unknown sink_type: {sink_type}. "
            f"Must be one of: stdlib, stdout, silent, syslog"
        )


def _create_syslog_sink(reveal_private: bool) -> LogSink:
    """Create a syslog sink, or a stdlib sink when no syslog socket exists."""
    address = _default(None, "APP_LOGGER_SYSLOG_ADDRESS", DEFAULT_ADDRESS)
    if not os.path.exists(address):
        logger.warning(
            "Syslog socket %s not found; falling back to stdlib logging", address
        )
        return StdlibSink(reveal_private=reveal_private)
    return SyslogSink(address=address, reveal_private=reveal_private)


def get_default_sink() -> LogSink:
    """Return the process-wide default sink, creating it on first use."""
    global _default_sink
    if _default_sink is None:
        _default_sink = create_sink()
    return _default_sink


def set_default_sink(sink: LogSink) -> None:
    """Replace the process-wide default sink.

    Loggers constructed afterwards without an explicit sink use it;
    existing loggers keep the sink they were built with.

    Args:
        sink: LogSink instance to use as the default
    """
    global _default_sink
    _default_sink = sink
