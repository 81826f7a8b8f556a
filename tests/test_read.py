import io

import pytest

import bifrostio


def test_read_empty_stream():
    assert bifrostio.read(io.BytesIO(b"")) == []


def test_read_unfinished_line():
    with pytest.raises(bifrostio.EndOfStreamError):
        bifrostio.read(io.BytesIO(b"a b\nc"))


def test_read_unterminated_quote():
    with pytest.raises(bifrostio.UnterminatedQuoteError):
        bifrostio.read(io.BytesIO(b"a 'b\n"))


def test_lazy_read_is_lazy():
    stream = io.BytesIO(b"first line\nsecond line\n")
    with bifrostio.lazy_read(stream) as lines:
        assert next(lines) == ["first", "line"]
        assert stream.tell() == len(b"first line\n")
        assert next(lines) == ["second", "line"]
        with pytest.raises(StopIteration):
            next(lines)


def test_lazy_read_closes_opened_file(tmp_path, monkeypatch):
    path = tmp_path / "lines"
    path.write_bytes(b"a\n")
    opened = []

    def recording_open(*args, **kwargs):
        opened.append(open(*args, **kwargs))
        return opened[-1]

    monkeypatch.setattr("_bifrostio.reading.open", recording_open, raising=False)
    with bifrostio.lazy_read(path) as lines:
        assert list(lines) == [["a"]]
        assert not opened[0].closed
    assert opened[0].closed


def test_lazy_read_does_not_close_given_stream():
    stream = io.BytesIO(b"a\n")
    with bifrostio.lazy_read(stream) as lines:
        list(lines)
    assert not stream.closed
