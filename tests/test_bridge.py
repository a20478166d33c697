from __future__ import annotations

import logging

from conftest import FakeWriter, RecordingHandler
from pyslog.config.schema import SyslogConfig
from pyslog.core.levels import Severity
from pyslog.core.manager import SyslogManager
from pyslog.handlers.bridge import SyslogBridgeHandler


def _manager(writer: FakeWriter, fallback: RecordingHandler) -> SyslogManager:
    fallback_logger = logging.getLogger("tests.bridge.fallback")
    fallback_logger.handlers = [fallback]
    fallback_logger.setLevel(logging.DEBUG)
    fallback_logger.propagate = False
    manager = SyslogManager(connector=lambda *_: writer, fallback=fallback_logger)
    manager.configure(SyslogConfig(network="udp", address="loghost:514"))
    return manager


def test_bridge_forwards_records_with_mapped_severity() -> None:
    writer = FakeWriter()
    manager = _manager(writer, RecordingHandler())
    handler = SyslogBridgeHandler(manager)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger = logging.getLogger("tests.bridge.app")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("starting %s", "worker")
        logger.warning("slow response")
        logger.critical("giving up")
    finally:
        logger.removeHandler(handler)

    assert writer.sent == [
        (Severity.DEBUG, "tests.bridge.app: starting worker"),
        (Severity.WARNING, "tests.bridge.app: slow response"),
        (Severity.CRIT, "tests.bridge.app: giving up"),
    ]


def test_bridge_ignores_fallback_logger_records() -> None:
    writer = FakeWriter(fail=True)
    fallback = RecordingHandler()
    manager = _manager(writer, fallback)
    handler = SyslogBridgeHandler(manager)
    fallback_logger = manager.fallback_logger
    fallback_logger.addHandler(handler)
    try:
        fallback_logger.error("loop?")
        logging.getLogger("tests.bridge.other").addHandler(handler)
        logging.getLogger("tests.bridge.other").error("lost")
    finally:
        fallback_logger.removeHandler(handler)
        logging.getLogger("tests.bridge.other").removeHandler(handler)

    assert fallback.messages.count("loop?") == 1
    assert "lost" in fallback.messages
