import zipfile

import pytest

from wren.loaders.zip import ZipLoader


@pytest.fixture
def archive_path(tmp_path):
    path = tmp_path / "assets.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("shaders/basic.vert", b"void main() {}")
        zf.writestr("textures/", b"")
    return path


def test_zip_loader_reads_member(archive_path, delegate):
    with ZipLoader.open(archive_path) as loader:
        handle = loader.load("shaders/basic.vert", delegate)

    assert handle is not None
    assert handle.read() == b"void main() {}"
    assert delegate.calls == ["shaders/basic.vert"]


def test_zip_loader_missing_member(archive_path, delegate):
    with ZipLoader.open(archive_path) as loader:
        assert loader.load("shaders/missing.vert", delegate) is None
        # Names must match exactly.
        assert loader.load("basic.vert", delegate) is None

    assert delegate.calls == []


def test_zip_loader_skips_directory_entries(archive_path, delegate):
    with ZipLoader.open(archive_path) as loader:
        assert loader.load("textures/", delegate) is None


def test_zip_loader_accepts_open_archive(archive_path, delegate):
    archive = zipfile.ZipFile(archive_path)
    loader = ZipLoader(archive)

    assert loader.load("shaders/basic.vert", delegate).read() == b"void main() {}"
    loader.close()


def _flip_member_bytes(path, name, count=20):
    """Corrupt the first ``count`` bytes of a member's compressed data."""
    with zipfile.ZipFile(path) as zf:
        info = zf.getinfo(name)
    raw = bytearray(path.read_bytes())
    header = info.header_offset
    name_len = int.from_bytes(raw[header + 26 : header + 28], "little")
    extra_len = int.from_bytes(raw[header + 28 : header + 30], "little")
    start = header + 30 + name_len + extra_len
    for i in range(start, start + min(count, info.compress_size)):
        raw[i] ^= 0xFF
    path.write_bytes(bytes(raw))


def test_zip_loader_corrupt_member_is_not_found(tmp_path, delegate):
    path = tmp_path / "corrupt.zip"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("a.txt", b"wren assets " * 200)
    _flip_member_bytes(path, "a.txt")

    with ZipLoader.open(path) as loader:
        assert loader.load("a.txt", delegate) is None


def test_zip_loader_skips_encrypted_members(tmp_path, delegate):
    path = tmp_path / "locked.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("secret.txt", b"hidden")
    raw = bytearray(path.read_bytes())
    # Set the "encrypted" bit in the central directory entry.
    central = raw.index(b"PK\x01\x02")
    raw[central + 8] |= 0x1
    path.write_bytes(bytes(raw))

    with ZipLoader.open(path) as loader:
        assert loader.load("secret.txt", delegate) is None

    assert delegate.calls == []


def test_zip_loader_close_closes_archive(archive_path):
    loader = ZipLoader.open(archive_path)

    with loader:
        pass

    assert loader.archive.fp is None
