import os
from pathlib import Path


def read_file(path):
    with open(path, "rb") as f:
        return f.read()


def write_file(data, path):
    with open(path, "wb") as f:
        f.write(data)


def append_to_path(path, suffix):
    """
    Append a raw suffix to the last component of a path
    :param path: base path
    :param suffix: string to append, e.g. ".bin"
    :return: privkey -> privkey.bin, key.pem -> key.pem.bin
    """
    return Path(os.fspath(path) + suffix)
