# File: tests/conftest.py

import os
import sys
import shutil
import subprocess
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from vidcat.core.config.settings import settings


@pytest.fixture(autouse=True)
def isolated_manifest_dir(tmp_path, monkeypatch):
    """
    Keeps per-run manifest directories inside the test's tmp_path.
    """
    manifest_dir = tmp_path / "manifests"
    monkeypatch.setattr(settings, "MANIFEST_DIR", manifest_dir)
    return manifest_dir


@pytest.fixture
def clip_folder(tmp_path):
    """
    Creates a folder with:
    - 2 clips matching prefix "clip_" and extension "mp4"
    - 1 mp4 without the prefix
    - 1 file with another extension
    """
    root = tmp_path / "vid"
    root.mkdir()
    (root / "clip_002.mp4").write_bytes(b"FAKE_VIDEO_2")
    (root / "clip_001.mp4").write_bytes(b"FAKE_VIDEO_1")
    (root / "other.mp4").write_bytes(b"FAKE_VIDEO_3")
    (root / "clip_notes.txt").write_text("not a video")
    return root


class FakeFFmpeg:
    """
    Stands in for subprocess.run. Records each command and snapshots the
    manifest it points at (temporary manifests are gone once run() returns).
    """

    def __init__(self, return_code: int = 0, stderr: str = ""):
        self.return_code = return_code
        self.stderr = stderr
        self.calls = []
        self.manifests = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        manifest = Path(cmd[cmd.index("-i") + 1])
        self.manifests.append(manifest.read_text(encoding="utf-8"))
        return subprocess.CompletedProcess(cmd, self.return_code, stdout="", stderr=self.stderr)


@pytest.fixture
def fake_ffmpeg(monkeypatch):
    fake = FakeFFmpeg()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture(scope="session")
def ffmpeg_binary():
    path = shutil.which("ffmpeg")
    if path is None or shutil.which("ffprobe") is None:
        pytest.skip("ffmpeg/ffprobe are not installed")
    return path
