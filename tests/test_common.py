import pytest

from sexc.common import SourceFile, read_file


def test_get_ch_returns_bytes():
    src = SourceFile.mock("abc")
    assert src.get_ch(0) == ord("a")
    assert src.get_ch(2) == ord("c")


def test_get_ch_past_end_is_none():
    src = SourceFile.mock("abc")
    assert src.get_ch(3) is None
    assert src.get_ch(100) is None


def test_get_ch_negative_is_none():
    assert SourceFile.mock("abc").get_ch(-1) is None


def test_slice_roundtrip():
    text = "let name = value;"
    src = SourceFile.mock(text)
    assert src.slice(0, len(text)) == text
    assert src.slice(4, 8) == text[4:8]


def test_slice_empty_range():
    assert SourceFile.mock("abc").slice(1, 1) == ""


def test_slice_out_of_range_raises():
    with pytest.raises(IndexError):
        SourceFile.mock("abc").slice(1, 10)


def test_slice_reversed_range_raises():
    with pytest.raises(IndexError):
        SourceFile.mock("abc").slice(2, 1)


def test_slice_inside_multibyte_char_raises():
    src = SourceFile.mock("é")
    with pytest.raises(UnicodeDecodeError):
        src.slice(0, 1)


def test_mock_has_empty_path():
    src = SourceFile.mock("x")
    assert src.path == ""
    assert src.content == "x"


def test_read_file(tmp_path, capsys):
    text = "let a = 1;\r\nlet b = 2;\n"
    target = tmp_path / "prog.sx"
    target.write_bytes(text.encode("utf-8"))
    src = read_file(target)
    assert src.content == text
    assert src.path == str(target)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Tried to Read {target}"
    assert out[1] == f"Read Bytes {len(text.encode('utf-8'))}"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.sx")


def test_read_invalid_utf8_raises(tmp_path):
    target = tmp_path / "bad.sx"
    target.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(UnicodeDecodeError):
        read_file(target)