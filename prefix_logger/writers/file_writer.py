"""File writer"""

import threading
from pathlib import Path
from typing import BinaryIO, Optional, Union

from prefix_logger.writers.base_writer import BaseWriter


class FileWriter(BaseWriter):
    """Write logs to file."""

    def __init__(self, filepath: Union[str, Path], mode: str = "ab"):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: Binary file open mode (default: 'ab' for append)
        """
        if "b" not in mode:
            raise ValueError(f"FileWriter needs a binary mode, got {mode!r}")
        self.filepath = Path(filepath)
        self.mode = mode
        self._file: Optional[BinaryIO] = None
        self._lock = threading.Lock()
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, data: bytes) -> int:
        """
        Write encoded line to file.

        Raises:
            ValueError: If the writer was closed
        """
        with self._lock:
            if self._file is None:
                raise ValueError(f"write to closed file writer: {self.filepath}")
            return self._file.write(data)

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
