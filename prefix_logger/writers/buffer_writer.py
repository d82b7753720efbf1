"""In-memory writer"""

import threading
from typing import List

from prefix_logger.writers.base_writer import BaseWriter


class BufferWriter(BaseWriter):
    """
    Collect log output in memory.

    Useful for tests and for capturing output before it is forwarded
    elsewhere. Every write() call is recorded as one chunk.
    """

    def __init__(self):
        self._data = bytearray()
        self._chunks = 0
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        with self._lock:
            self._data.extend(data)
            self._chunks += 1
        return len(data)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        with self._lock:
            return bytes(self._data)

    def text(self, encoding: str = "utf-8") -> str:
        """Return everything written so far, decoded."""
        return self.getvalue().decode(encoding)

    def lines(self, encoding: str = "utf-8") -> List[str]:
        """Return the decoded output split into lines, without line endings."""
        return self.text(encoding).splitlines()

    @property
    def write_count(self) -> int:
        """Number of write() calls received."""
        with self._lock:
            return self._chunks

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._chunks = 0
