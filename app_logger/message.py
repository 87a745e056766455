# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Message text paired with its privacy annotation."""

from dataclasses import dataclass

from .severity import Privacy

REDACTED = "<private>"


@dataclass(frozen=True)
class AnnotatedMessage:
    """A log message and the rendering mode a sink must apply to it.

    The text is carried unchanged; redaction happens only when a sink
    renders the message.
    """

    text: str
    privacy: Privacy = Privacy.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.privacy is Privacy.PRIVATE

    def render(self, reveal_private: bool = False) -> str:
        """Return the text as an unprivileged or privileged viewer sees it.

        Args:
            reveal_private: Show private text instead of the placeholder

        Returns:
            Message text, or the redaction placeholder for private messages
        """
        if self.is_private and not reveal_private:
            return REDACTED
        return self.text
