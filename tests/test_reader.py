import io
import tempfile
from pathlib import Path

import pytest

from commit_lint.logging_config import setup_logging
from commit_lint.reader import decode_text, read_header, read_header_file, strip_newline


def test_strip_newline():
    """Test one trailing newline is removed."""
    assert strip_newline("feat: x\n") == "feat: x"
    assert strip_newline("feat: x\r\n") == "feat: x"
    assert strip_newline("feat: x\n\n") == "feat: x\n"


def test_strip_newline_without_newline():
    """Test text without a newline is unchanged."""
    assert strip_newline("feat: x") == "feat: x"
    assert strip_newline("") == ""


def test_read_header_first_line_only():
    """Test only the first line of the stream is read."""
    stream = io.BytesIO(b"feat: first\nbody line\n")

    assert read_header(stream) == "feat: first"


def test_read_header_empty_stream():
    """Test immediate EOF gives an empty header."""
    assert read_header(io.BytesIO(b"")) == ""


def test_read_header_unterminated_line():
    """Test last line without newline is used as is."""
    assert read_header(io.BytesIO(b"fix: no newline")) == "fix: no newline"


def test_read_header_file():
    """Test reading the first line of a message file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        msg_file = Path(tmpdir) / "COMMIT_MSG"
        msg_file.write_text("feat: add reader\n\nLonger body.\n", encoding="utf-8")

        assert read_header_file(msg_file) == "feat: add reader"


def test_read_header_file_latin1_fallback():
    """Test fallback to latin-1 for invalid UTF-8."""
    with tempfile.TemporaryDirectory() as tmpdir:
        msg_file = Path(tmpdir) / "COMMIT_MSG"
        msg_file.write_bytes("fix: café\n".encode("latin-1"))

        assert read_header_file(msg_file) == "fix: café"


def test_read_header_file_empty():
    """Test empty file gives an empty header."""
    with tempfile.TemporaryDirectory() as tmpdir:
        msg_file = Path(tmpdir) / "COMMIT_MSG"
        msg_file.write_text("")

        assert read_header_file(msg_file) == ""


def test_read_header_file_missing():
    """Test missing file raises OSError."""
    with pytest.raises(OSError):
        read_header_file(Path("/nonexistent/COMMIT_MSG"))


def test_read_header_latin1_fallback():
    """Test stdin bytes that are not UTF-8 decode as latin-1."""
    assert read_header(io.BytesIO(b"feat: caf\xe9\n")) == "feat: café"


def test_read_header_utf8():
    """Test UTF-8 stdin bytes decode as UTF-8."""
    assert read_header(io.BytesIO("feat: café\n".encode("utf-8"))) == "feat: café"


def test_decode_text_logs_fallback():
    """Test the latin-1 fallback is logged as a warning."""
    stream = io.StringIO()
    setup_logging(stream=stream)

    assert decode_text(b"caf\xe9", "Input") == "café"
    assert "commit-lint: WARNING: Input is not valid UTF-8" in stream.getvalue()
