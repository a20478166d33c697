from __future__ import annotations

import logging
import os
import shutil
import socket
import tempfile
from pathlib import Path
from typing import Iterator, List

import pytest

from pyslog.config import loader
from pyslog.core.levels import Severity
from pyslog.core.manager import GLOBAL_MANAGER


class RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self) -> List[str]:
        return [record.getMessage() for record in self.records]


class FakeWriter:
    def __init__(self, name: str = "fake", *, fail: bool = False) -> None:
        self.name = name
        self.fail = fail
        self.sent: List[tuple[Severity, str]] = []
        self.close_calls = 0

    def send(self, severity: Severity, message: str) -> None:
        if self.fail:
            raise OSError(f"{self.name} is down")
        self.sent.append((severity, message))

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture(autouse=True)
def reset_pyslog() -> Iterator[None]:
    yield
    GLOBAL_MANAGER.shutdown()
    GLOBAL_MANAGER.set_fallback_logger(None)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(loader, "user_config_dir", lambda _: str(tmp_path / "user-config"))
    for key in list(os.environ):
        if key.startswith("PYSLOG__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fallback() -> Iterator[RecordingHandler]:
    handler = RecordingHandler()
    logger = logging.getLogger("tests.fallback")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    GLOBAL_MANAGER.set_fallback_logger(logger)
    yield handler
    logger.handlers = []


@pytest.fixture
def unix_syslog_socket() -> Iterator[tuple[str, socket.socket]]:
    if not hasattr(socket, "AF_UNIX"):
        pytest.skip("unix sockets are not available")
    # short directory keeps the path under the AF_UNIX length limit
    directory = tempfile.mkdtemp(prefix="pyslog")
    path = os.path.join(directory, "log")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(path)
    server.settimeout(2.0)
    try:
        yield path, server
    finally:
        server.close()
        shutil.rmtree(directory, ignore_errors=True)


@pytest.fixture
def udp_syslog_socket() -> Iterator[tuple[str, socket.socket]]:
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(2.0)
    host, port = server.getsockname()
    try:
        yield f"{host}:{port}", server
    finally:
        server.close()
