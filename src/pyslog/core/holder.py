"""Process-wide slot holding the current syslog writer."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

__all__ = ["ConnectionHolder"]

W = TypeVar("W")


class ConnectionHolder(Generic[W]):
    """Single reference to the current writer.

    Reads never block. Replacing the writer takes a private lock only for
    the exchange itself; the displaced writer is handed back to the caller,
    who closes it without holding anything.
    """

    def __init__(self) -> None:
        self._current: W | None = None
        self._swap_lock = threading.Lock()

    def current(self) -> W | None:
        return self._current

    def swap(self, writer: W | None) -> W | None:
        """Install ``writer`` as current and return the one it replaced."""

        with self._swap_lock:
            previous, self._current = self._current, writer
        return previous
