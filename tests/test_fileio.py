import pytest

from meshkit.fileio import load_file_content


def test_reads_exact_bytes(tmp_path):
    payload = bytes(range(256)) * 3
    target = tmp_path / "blob.bin"
    target.write_bytes(payload)
    assert load_file_content(target) == payload


def test_reads_text_file_unchanged(tmp_path):
    target = tmp_path / "model.obj"
    target.write_bytes(b"v 1 2 3\r\nf 1 1 1\n")
    assert load_file_content(str(target)) == b"v 1 2 3\r\nf 1 1 1\n"


def test_empty_file_gives_empty_bytes(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    assert load_file_content(target) == b""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file_content(tmp_path / "absent.bin")


def test_none_path_raises():
    with pytest.raises(ValueError):
        load_file_content(None)