import pytest

from vidcat.core.errors import CreateOutputError, WriteFileError
from vidcat.features.video_concat.data import manifest_writer
from vidcat.features.video_concat.data.manifest_writer import ConcatManifestWriter, render_manifest


def test_render_manifest_format():
    assert render_manifest(["x", "y"]) == "file 'x'\nfile 'y'\n"


def test_render_empty_manifest():
    assert render_manifest([]) == ""


def test_write_creates_utf8_manifest(tmp_path):
    manifest = tmp_path / "list.txt"
    files = [str(tmp_path / "clip_001.mp4"), str(tmp_path / "clíp_002.mp4")]

    ConcatManifestWriter().write(files, manifest)

    assert manifest.read_bytes() == render_manifest(files).encode("utf-8")


def test_write_truncates_existing_manifest(tmp_path):
    manifest = tmp_path / "list.txt"
    manifest.write_text("file 'stale-1'\nfile 'stale-2'\nfile 'stale-3'\n")

    ConcatManifestWriter().write(["fresh"], manifest)

    assert manifest.read_text() == "file 'fresh'\n"


def test_single_quote_is_not_escaped(tmp_path, caplog):
    manifest = tmp_path / "list.txt"

    ConcatManifestWriter().write(["it's.mp4"], manifest)

    assert manifest.read_text() == "file 'it's.mp4'\n"
    assert "single quote" in caplog.text


def test_uncreatable_manifest_raises(tmp_path):
    with pytest.raises(CreateOutputError):
        ConcatManifestWriter().write(["x"], tmp_path / "missing_dir" / "list.txt")


class _FailingHandle:
    def __init__(self, fail_after):
        self.fail_after = fail_after
        self.lines = []

    def write(self, text):
        if len(self.lines) >= self.fail_after:
            raise OSError(28, "No space left on device")
        self.lines.append(text)

    def flush(self):
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_failed_write_raises_and_keeps_partial_output(tmp_path, monkeypatch):
    handle = _FailingHandle(fail_after=1)
    monkeypatch.setattr(manifest_writer, "open", lambda *args, **kwargs: handle, raising=False)

    with pytest.raises(WriteFileError):
        ConcatManifestWriter().write(["a", "b", "c"], tmp_path / "list.txt")

    assert handle.lines == ["file 'a'\n"]


class _FailingCloseHandle(_FailingHandle):
    def close(self):
        raise OSError(5, "Input/output error")


def test_failed_close_raises_write_error(tmp_path, monkeypatch):
    handle = _FailingCloseHandle(fail_after=10)
    monkeypatch.setattr(manifest_writer, "open", lambda *args, **kwargs: handle, raising=False)

    with pytest.raises(WriteFileError):
        ConcatManifestWriter().write(["a", "b"], tmp_path / "list.txt")


def test_undecodable_path_raises_write_error(tmp_path):
    manifest = tmp_path / "list.txt"

    with pytest.raises(WriteFileError):
        ConcatManifestWriter().write(["clip_\udcff.mp4"], manifest)

    assert manifest.exists()
