import io
from pathlib import Path

import pytest

from unixkit.errors import FileAccessError
from unixkit.infrastructure.fs import iter_inputs, open_input, open_text, strip_newline


def test_open_input_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as info:
        open_input(str(tmp_path / "nope.txt"))

    assert info.value.reason == "No such file or directory"
    assert str(info.value).endswith("nope.txt: No such file or directory")


def test_open_input_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError, match="Is a directory"):
        open_input(str(tmp_path))


def test_iter_inputs_reports_and_continues(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "a.txt").write_bytes(b"one\n")

    seen = [(name, handle.read()) for name, handle in iter_inputs(["missing", "a.txt"])]

    assert seen == [("a.txt", b"one\n")]
    assert "missing: No such file or directory" in capsys.readouterr().err


def test_iter_inputs_closes_each_file(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_bytes(b"a")
    (tmp_path / "b.txt").write_bytes(b"b")

    handles = [handle for _name, handle in iter_inputs(["a.txt", "b.txt"])]

    assert all(handle.closed for handle in handles)


def test_open_text_leaves_handle_open() -> None:
    raw = io.BytesIO(b"a\r\nb\xff\n")

    with open_text(raw) as text:
        content = text.read()

    assert content == "a\r\nb�\n"
    assert not raw.closed


def test_strip_newline() -> None:
    assert strip_newline(b"abc\n") == b"abc"
    assert strip_newline(b"abc\r\n") == b"abc"
    assert strip_newline(b"abc") == b"abc"
    assert strip_newline(b"abc\r") == b"abc\r"
