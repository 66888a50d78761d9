import subprocess
import logging
from pathlib import Path
from typing import List, Optional

from vidcat.core.config.settings import settings
from vidcat.core.errors import CommandError
from ..domain.interfaces import IConcatRunner
from ..domain.models import ConcatResult

logger = logging.getLogger(__name__)


class FFmpegConcatAdapter(IConcatRunner):
    """
    Concrete implementation of IConcatRunner using the FFmpeg concat demuxer.
    Streams are copied, never re-encoded.
    """

    def __init__(self, ffmpeg_binary: Optional[str] = None, loglevel: Optional[str] = None):
        self.ffmpeg_binary = ffmpeg_binary or settings.FFMPEG_BINARY
        self.loglevel = loglevel or settings.FFMPEG_LOGLEVEL

    def build_command(self, manifest_path: Path, output_path: Path, overwrite: bool = False) -> List[str]:
        # -f concat: Read the input list with the concat demuxer
        # -safe 0: Accept absolute/relative paths outside the manifest's folder
        # -c copy: Stream copy, no re-encode
        # -y / -n: Overwrite or refuse an existing output (never prompt)
        return [
            self.ffmpeg_binary,
            "-hide_banner",
            "-loglevel", self.loglevel,
            "-y" if overwrite else "-n",
            "-f", "concat",
            "-safe", "0",
            "-i", str(manifest_path),
            "-c", "copy",
            str(output_path),
        ]

    def run(self, manifest_path: Path, output_path: Path, overwrite: bool = False) -> ConcatResult:
        cmd = self.build_command(manifest_path, output_path, overwrite)
        logger.info(f"Executing FFmpeg Concat: {' '.join(cmd)}")

        try:
            completed = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            logger.error(f"Could not start {self.ffmpeg_binary}: {e}")
            raise CommandError(f"Could not start {self.ffmpeg_binary}: {e}") from e

        result = ConcatResult(
            output_path=Path(output_path),
            return_code=completed.returncode,
            stderr=completed.stderr or "",
        )
        if not result.success:
            logger.error(f"FFmpeg Concat Failed (exit {result.return_code}). STDERR: {result.stderr.strip()}")
        return result
