"""Tests for writer sinks"""

import io
import threading

import pytest

from prefix_logger import LoggerBuilder, LogLevel
from prefix_logger.writers import BaseWriter, BufferWriter, ConsoleWriter, FileWriter


class TestBufferWriter:
    """Test in-memory writer."""

    def test_write_and_read(self):
        writer = BufferWriter()
        assert writer.write(b"one\n") == 4
        writer.write(b"two\n")

        assert writer.getvalue() == b"one\ntwo\n"
        assert writer.lines() == ["one", "two"]
        assert writer.write_count == 2

    def test_clear(self):
        writer = BufferWriter()
        writer.write(b"data")
        writer.clear()
        assert writer.getvalue() == b""
        assert writer.write_count == 0

    def test_concurrent_writes(self):
        writer = BufferWriter()

        def work():
            for _ in range(500):
                writer.write(b"x\n")

        threads = [threading.Thread(target=work) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert writer.write_count == 5000
        assert writer.lines() == ["x"] * 5000


class TestConsoleWriter:
    """Test console writer."""

    def test_text_stream_without_buffer(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        assert writer.write("héllo\n".encode("utf-8")) == len("héllo\n".encode("utf-8"))
        assert stream.getvalue() == "héllo\n"

    def test_binary_buffer(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="utf-8")
        writer = ConsoleWriter(stream=stream)
        writer.write(b"line\n")
        assert raw.getvalue() == b"line\n"

    def test_default_stream_is_stderr(self, capsys):
        logger = LoggerBuilder().with_output(ConsoleWriter()).build()
        logger.warn("to stderr")

        captured = capsys.readouterr()
        assert captured.err == "[WRN] to stderr\n"
        assert captured.out == ""

    def test_stdout(self, capsys):
        import sys

        writer = ConsoleWriter(stream=sys.stdout)
        writer.write(b"to stdout\n")
        assert capsys.readouterr().out == "to stdout\n"


class TestFileWriter:
    """Test file writer."""

    def test_writes_to_file(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        with FileWriter(path) as writer:
            logger = LoggerBuilder().with_level(LogLevel.INFO).with_output(writer).build()
            logger.debug("skipped")
            logger.info("kept")
            logger.with_prefix("db").error("failed")

        assert path.read_bytes() == b"[INF] kept\n[ERR] db: failed\n"

    def test_appends(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_bytes(b"old\n")

        writer = FileWriter(path)
        writer.write(b"new\n")
        writer.close()

        assert path.read_bytes() == b"old\nnew\n"

    def test_requires_binary_mode(self, tmp_path):
        with pytest.raises(ValueError):
            FileWriter(tmp_path / "app.log", mode="a")

    def test_write_after_close(self, tmp_path):
        writer = FileWriter(tmp_path / "app.log")
        writer.close()
        assert writer.closed
        with pytest.raises(ValueError):
            writer.write(b"late")

    def test_logger_drops_closed_writer_errors(self, tmp_path):
        writer = FileWriter(tmp_path / "app.log")
        logger = LoggerBuilder().with_output(writer).build()
        writer.close()

        logger.info("lost")
        assert logger.get_metrics()["write_errors"] == 1


class TestBaseWriter:
    """Test writer interface."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseWriter()

    def test_context_manager_closes(self):
        class Closing(BaseWriter):
            closed = False

            def write(self, data):
                return len(data)

            def close(self):
                self.closed = True

        with Closing() as writer:
            writer.write(b"x")
        assert writer.closed
