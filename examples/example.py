#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Example usage of the app_logger module.

This script demonstrates logging through the different sinks and how
private messages are rendered.
"""

import logging

from app_logger import AppLogger, Severity, SilentSink, create_sink


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("App Logger Examples")
    print("=" * 60)
    print()

    # Example 1: stdlib logging tree
    print("Example 1: StdlibSink (default)")
    print("-" * 60)
    # Handler on the subsystem's logger; other records keep the root format
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(levelname)s %(subsystem)s/%(category)s [%(privacy)s] %(message)s")
    )
    shop_logger = logging.getLogger("com.example.shop")
    shop_logger.addHandler(handler)
    shop_logger.setLevel(logging.DEBUG)
    shop_logger.propagate = False

    logger = AppLogger(subsystem="com.example.shop", category="network")

    logger.log("Request sent")
    logger.log("Response received", level=Severity.INFO)
    logger.log("Session token abc123", level=Severity.NOTICE, is_private=True)
    print()

    # Example 2: JSON lines on stdout
    print("Example 2: StdoutSink with INFO level")
    print("-" * 60)
    json_logger = AppLogger(
        subsystem="com.example.shop",
        category="checkout",
        sink=create_sink(sink_type="stdout", level="INFO"),
    )

    json_logger.log("This debug message won't appear (below INFO level)")
    json_logger.info("Cart loaded")
    json_logger.error("Card ending 4242 declined", is_private=True)
    print()

    # Example 3: Silent sink for testing
    print("Example 3: SilentSink for testing")
    print("-" * 60)
    sink = SilentSink()
    test_logger = AppLogger(category="tests", sink=sink)

    test_logger.log("Test message 1")
    test_logger.notice("Test notice")
    test_logger.fault("Test fault", is_private=True)

    print(f"Total logs captured: {len(sink.logs)}")
    print(f"Has 'Test message 1': {sink.has_log('Test message 1')}")
    print(f"Fault logs: {len(sink.get_logs(level=Severity.FAULT))}")

    print("\nLogged messages:")
    for log in sink.logs:
        print(f"  [{log['level'].name}] {log['subsystem']}/{log['category']}: {log['rendered']}")


if __name__ == "__main__":
    main()
