from pathlib import Path

import pytest

from rsa_roundtrip.files import append_to_path, read_file, write_file


@pytest.mark.parametrize("path,expected", [
    ("privkey", "privkey.bin"),
    ("./privkey", "privkey.bin"),
    ("keys/key.pem", "keys/key.pem.bin"),
    (Path("/tmp/k"), "/tmp/k.bin"),
])
def test_append_to_path(path, expected):
    assert append_to_path(path, ".bin") == Path(expected)


def test_write_then_read(tmp_path):
    path = tmp_path / "data"
    write_file(b"\x00\x01\xff", path)
    assert read_file(path) == b"\x00\x01\xff"
    write_file(b"x", path)
    assert read_file(path) == b"x"


def test_write_into_missing_dir(tmp_path):
    with pytest.raises(OSError):
        write_file(b"x", tmp_path / "missing" / "data")
