import contextlib
import logging
from pathlib import Path
from typing import Iterable, Sequence

from vidcat.core.errors import CreateOutputError, WriteFileError
from ..domain.interfaces import IManifestWriter

logger = logging.getLogger(__name__)


def manifest_line(path: str) -> str:
    # No quote escaping: a path containing ' yields a malformed entry
    return f"file '{path}'\n"


def render_manifest(paths: Iterable[str]) -> str:
    """Manifest text for the ffmpeg concat demuxer, one entry per path."""
    return "".join(manifest_line(p) for p in paths)


class ConcatManifestWriter(IManifestWriter):
    """
    Writes the concat demuxer input list as UTF-8 text.
    A failed write leaves the partial manifest in place.
    """

    def write(self, files: Sequence[str], manifest_path: Path) -> Path:
        try:
            handle = open(manifest_path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise CreateOutputError(f"Cannot create manifest {manifest_path}: {e}") from e

        try:
            for path in files:
                if "'" in path:
                    logger.warning(f"Path contains a single quote, manifest entry will be malformed: {path}")
                handle.write(manifest_line(path))
            handle.close()
        except (OSError, UnicodeEncodeError) as e:
            # The partial manifest stays on disk; the first failure is what gets reported
            with contextlib.suppress(OSError):
                handle.close()
            raise WriteFileError(f"Cannot write manifest {manifest_path}: {e}") from e

        logger.debug(f"Wrote manifest {manifest_path} with {len(files)} entries")
        return manifest_path
