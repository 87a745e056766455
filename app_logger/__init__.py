# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""App Logger.

A small facade over a platform logging facility. A logger is bound to a
subsystem and a category and emits string messages at a severity, each
annotated as public or private so the sink can redact it.

Sinks are pluggable; the default forwards into the standard library
``logging`` tree.

Example:
    >>> from app_logger import AppLogger, Severity
    >>>
    >>> logger = AppLogger(subsystem="com.example.shop", category="network")
    >>> logger.log("Request sent", level=Severity.INFO)
    >>> logger.log("Token refreshed for user 42", is_private=True)
    >>>
    >>> # Capture records in memory for testing
    >>> from app_logger import SilentSink
    >>> sink = SilentSink()
    >>> AppLogger(sink=sink).log("hello")
    >>> sink.has_log("hello")
    True
"""

__version__ = "0.1.0"

from .facade import AppLogger
from .defaults import Defaults
from .factory import create_sink, get_default_sink, set_default_sink
from .handle import LoggerHandle
from .message import AnnotatedMessage
from .severity import Privacy, Severity
from .silent_sink import SilentSink
from .sink import LogSink
from .stdlib_sink import StdlibSink
from .stdout_sink import StdoutSink
from .syslog_sink import SyslogSink

__all__ = [
    "__version__",
    "AnnotatedMessage",
    "AppLogger",
    "Defaults",
    "LogSink",
    "LoggerHandle",
    "Privacy",
    "Severity",
    "SilentSink",
    "StdlibSink",
    "StdoutSink",
    "SyslogSink",
    "create_sink",
    "get_default_sink",
    "set_default_sink",
]
