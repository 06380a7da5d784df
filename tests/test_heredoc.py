import io
import os

from pipex.heredoc import collect_heredoc, is_limiter


def test_is_limiter_exact_line():
    assert is_limiter("EOF\n", "EOF") is True


def test_is_limiter_prefix_matches():
    assert is_limiter("EOFX\n", "EOF") is True


def test_is_limiter_other_line():
    assert is_limiter("xEOF\n", "EOF") is False


def test_is_limiter_mixed_types():
    assert is_limiter(b"END\n", "END") is True
    assert is_limiter("END\n", b"END") is True
    assert is_limiter(b"STOP\n", "END") is False


def test_is_limiter_none_line():
    assert is_limiter(None, "EOF") is False


def test_collect_stops_at_limiter():
    stream = io.BytesIO(b"a\nb\nEOF\nc\n")
    assert collect_heredoc(stream, "EOF") == b"a\nb\n"


def test_collect_without_limiter_returns_all():
    data = b"one\ntwo\nthree"
    assert collect_heredoc(io.BytesIO(data), "EOF") == data


def test_collect_text_stream():
    assert collect_heredoc(io.StringIO("x\nLIM\ny\n"), "LIM") == "x\n"


def test_collect_empty_text_stream():
    assert collect_heredoc(io.StringIO("LIM\n"), "LIM") == ""


def test_collect_empty_binary_stream():
    assert collect_heredoc(io.BytesIO(b""), "LIM") == b""


def test_collect_from_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"first line\nsecond\nSTOP\nafter\n")
        os.close(write_fd)
        assert collect_heredoc(read_fd, "STOP") == b"first line\nsecond\n"
    finally:
        os.close(read_fd)


def test_collect_long_lines_across_buffers():
    line = b"z" * 100 + b"\n"
    stream = io.BytesIO(line * 3 + b"END\n")
    assert collect_heredoc(stream, "END") == line * 3