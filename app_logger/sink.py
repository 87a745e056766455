# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Abstract log sink interface."""

from abc import ABC, abstractmethod

from .message import AnnotatedMessage
from .severity import Severity


class LogSink(ABC):
    """Abstract base class for logging destinations.

    A sink owns storage, level filtering, redaction enforcement and
    presentation of the records it receives.
    """

    @abstractmethod
    def emit(
        self,
        subsystem: str,
        category: str,
        level: Severity,
        message: AnnotatedMessage,
    ) -> None:
        """Write one record.

        Args:
            subsystem: Coarse-grained namespace of the record
            category: Fine-grained namespace within the subsystem
            level: Severity of the record
            message: Message text with its privacy annotation
        """
        pass
