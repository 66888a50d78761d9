# File: vidcat/core/config/settings.py

import os
import shutil
import tempfile
from pathlib import Path


class Settings:
    # --- External Tools ---
    # Auto-detect ffmpeg or use env var
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")
    FFMPEG_LOGLEVEL: str = os.getenv("VIDCAT_FFMPEG_LOGLEVEL", "error")

    # --- Paths ---
    # Per-run manifest directories are created (and removed) under here
    MANIFEST_DIR: Path = Path(os.getenv("VIDCAT_MANIFEST_DIR", tempfile.gettempdir()))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("VIDCAT_LOG_LEVEL", "WARNING").upper()

    def ensure_dirs(self):
        """Creates the manifest directory if it doesn't exist."""
        self.MANIFEST_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
