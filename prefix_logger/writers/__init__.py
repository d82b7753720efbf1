"""Writers module - Log output sinks"""

from prefix_logger.writers.base_writer import BaseWriter
from prefix_logger.writers.buffer_writer import BufferWriter
from prefix_logger.writers.console_writer import ConsoleWriter
from prefix_logger.writers.file_writer import FileWriter

__all__ = ["BaseWriter", "BufferWriter", "ConsoleWriter", "FileWriter"]
