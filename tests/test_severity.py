# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Tests for severities, privacy modes and annotated messages."""

import logging

import pytest

from app_logger import AnnotatedMessage, Privacy, Severity


class TestSeverity:
    """Tests for the Severity enum."""

    def test_values_match_stdlib_levels(self):
        """Test that severities map onto stdlib logging level numbers."""
        assert Severity.DEBUG == logging.DEBUG
        assert Severity.INFO == logging.INFO
        assert Severity.NOTICE == 25
        assert Severity.ERROR == logging.ERROR
        assert Severity.FAULT == logging.CRITICAL

    def test_notice_level_name_registered(self):
        """Test that the NOTICE level has a stdlib name."""
        assert logging.getLevelName(25) == "NOTICE"

    def test_default_is_notice_alias(self):
        """Test that DEFAULT is an alias of NOTICE."""
        assert Severity.DEFAULT is Severity.NOTICE

    def test_ordering(self):
        """Test that severities order from least to most important."""
        assert Severity.DEBUG < Severity.INFO < Severity.NOTICE < Severity.ERROR < Severity.FAULT

    def test_parse_member(self):
        """Test that parse returns members unchanged."""
        assert Severity.parse(Severity.ERROR) is Severity.ERROR

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("debug", Severity.DEBUG),
            ("INFO", Severity.INFO),
            (" Notice ", Severity.NOTICE),
            ("default", Severity.NOTICE),
            ("fault", Severity.FAULT),
        ],
    )
    def test_parse_names(self, name, expected):
        """Test parsing case-insensitive severity names."""
        assert Severity.parse(name) is expected

    def test_parse_invalid_name(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Invalid severity"):
            Severity.parse("verbose")

    def test_parse_stdlib_level_numbers(self):
        """Test parsing stdlib logging level numbers."""
        assert Severity.parse(logging.ERROR) is Severity.ERROR
        assert Severity.parse(logging.CRITICAL) is Severity.FAULT
        assert Severity.parse(25) is Severity.NOTICE

    def test_parse_unknown_level_number(self):
        """Test that level numbers without a severity raise ValueError."""
        with pytest.raises(ValueError, match="Invalid severity"):
            Severity.parse(logging.WARNING)

    def test_syslog_priorities(self):
        """Test syslog priority names for each severity."""
        assert Severity.DEBUG.syslog_priority == "debug"
        assert Severity.INFO.syslog_priority == "info"
        assert Severity.NOTICE.syslog_priority == "notice"
        assert Severity.ERROR.syslog_priority == "err"
        assert Severity.FAULT.syslog_priority == "crit"


class TestPrivacy:
    """Tests for the Privacy enum."""

    def test_from_flag(self):
        """Test mapping the boolean flag to a rendering mode."""
        assert Privacy.from_flag(True) is Privacy.PRIVATE
        assert Privacy.from_flag(False) is Privacy.PUBLIC


class TestAnnotatedMessage:
    """Tests for AnnotatedMessage rendering."""

    def test_public_renders_text(self):
        """Test that public messages render their text."""
        message = AnnotatedMessage("hello", Privacy.PUBLIC)

        assert message.render() == "hello"
        assert not message.is_private

    def test_private_renders_placeholder(self):
        """Test that private messages are redacted by default."""
        message = AnnotatedMessage("secret", Privacy.PRIVATE)

        assert message.render() == "<private>"
        assert message.text == "secret"
        assert message.is_private

    def test_private_revealed(self):
        """Test that private text is shown to privileged viewers."""
        message = AnnotatedMessage("secret", Privacy.PRIVATE)

        assert message.render(reveal_private=True) == "secret"

    def test_default_privacy_is_public(self):
        """Test that messages are public unless annotated otherwise."""
        assert AnnotatedMessage("x").privacy is Privacy.PUBLIC

    def test_immutable(self):
        """Test that annotated messages cannot be modified."""
        message = AnnotatedMessage("hello")

        with pytest.raises(AttributeError):
            message.text = "changed"
