import logging
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from vidcat.core.config.settings import settings
from vidcat.core.errors import CreateOutputError
from vidcat.core.shared_types import MediaFile
from ..domain.interfaces import IConcatRunner, IDirectoryScanner, IManifestWriter
from ..domain.models import ConcatRequest, ConcatResult, ScanFilter
from ..data.directory_scanner import LocalDirectoryScanner
from ..data.manifest_writer import ConcatManifestWriter
from ..data.ffmpeg_adapter import FFmpegConcatAdapter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MANIFEST_NAME = "file_list.txt"


class VideoConcatService:
    """
    Scan -> manifest -> ffmpeg, wired from swappable adapters.
    """

    def __init__(self,
                 scanner: Optional[IDirectoryScanner] = None,
                 writer: Optional[IManifestWriter] = None,
                 runner: Optional[IConcatRunner] = None):
        self.scanner = scanner or LocalDirectoryScanner()
        self.writer = writer or ConcatManifestWriter()
        self.runner = runner or FFmpegConcatAdapter()

    def scan(self, scan_filter: ScanFilter) -> List[str]:
        return self.scanner.scan(scan_filter)

    def build_and_run(self,
                      files: Sequence[str],
                      output: MediaFile,
                      overwrite: bool = False,
                      manifest_path: Optional[Path] = None) -> ConcatResult:
        """
        Writes the manifest for `files` (in the given order) and runs the concat.

        With an explicit manifest_path the manifest is kept after the run,
        otherwise it lives in a private temporary directory that is always removed.
        """
        files = list(files)
        if manifest_path is not None:
            result = self._write_and_run(files, output, overwrite, Path(manifest_path))
        else:
            try:
                settings.ensure_dirs()
                tmp = tempfile.TemporaryDirectory(prefix="vidcat-", dir=settings.MANIFEST_DIR)
            except OSError as e:
                raise CreateOutputError(f"Cannot create manifest directory under {settings.MANIFEST_DIR}: {e}") from e
            with tmp as tmp_dir:
                result = self._write_and_run(files, output, overwrite, Path(tmp_dir) / MANIFEST_NAME)

        result.files = files
        return result

    def run(self, request: ConcatRequest) -> ConcatResult:
        files = self.scan(request.scan_filter)
        if not files:
            # The tool is still invoked and will report the empty input list
            logger.warning(f"No files in {request.scan_filter.directory} match "
                           f"prefix={request.scan_filter.prefix!r} ext={request.scan_filter.extension!r}")
        if request.output.exists() and not request.overwrite:
            logger.warning(f"Output {request.output.path} already exists, ffmpeg will refuse to overwrite it")
        return self.build_and_run(files, request.output, request.overwrite, request.manifest_path)

    def _write_and_run(self, files: List[str], output: MediaFile, overwrite: bool, manifest_path: Path) -> ConcatResult:
        self.writer.write(files, manifest_path)
        return self.runner.run(manifest_path, output.path, overwrite)


def scan_directory(directory: PathLike, prefix: str, extension: str) -> List[str]:
    """
    Public Service API: List the clips of a directory in concatenation order.

    Args:
        directory: Folder to scan (not recursive).
        prefix: Required case-sensitive file name prefix ("" matches all).
        extension: Required case-insensitive extension, e.g. "mp4".
    """
    return VideoConcatService().scan(ScanFilter(Path(directory), prefix, extension))


def build_and_run(file_list: Sequence[str],
                  output_path: PathLike,
                  *,
                  overwrite: bool = False,
                  manifest_path: Optional[PathLike] = None) -> ConcatResult:
    """
    Public Service API: Concatenate an ordered list of files into output_path.

    Returns a ConcatResult whose truthiness is the tool's success.
    Raises CreateOutputError / WriteFileError for manifest problems and
    CommandError when ffmpeg cannot be started.
    """
    return VideoConcatService().build_and_run(
        file_list,
        MediaFile(Path(output_path)),
        overwrite=overwrite,
        manifest_path=Path(manifest_path) if manifest_path is not None else None,
    )


def concat_videos(directory: PathLike,
                  prefix: str,
                  extension: str,
                  output_path: PathLike,
                  *,
                  overwrite: bool = False,
                  manifest_path: Optional[PathLike] = None) -> ConcatResult:
    """
    Public Service API: Concatenate every matching clip of a directory.
    """
    # 1. Map Primitives to Domain Objects
    # ffmpeg resolves relative manifest entries against the manifest folder
    request = ConcatRequest(
        scan_filter=ScanFilter(Path(directory).absolute(), prefix, extension),
        output=MediaFile(Path(output_path)),
        overwrite=overwrite,
        manifest_path=Path(manifest_path) if manifest_path is not None else None,
    )

    # 2. Execute Logic
    return VideoConcatService().run(request)
