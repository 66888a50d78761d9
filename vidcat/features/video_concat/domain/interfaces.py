from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

from .models import ConcatResult, ScanFilter


class IDirectoryScanner(ABC):
    """
    Contract for collecting the clips to concatenate.
    """
    @abstractmethod
    def scan(self, scan_filter: ScanFilter) -> List[str]:
        """
        Lists the direct entries of scan_filter.directory that are regular files
        matching both the prefix and the extension, sorted ascending.

        Raises:
            FolderNotFoundError: If the directory does not exist.
            AccessDeniedError: If the directory cannot be listed.
        """
        pass


class IManifestWriter(ABC):
    """
    Contract for producing the input list consumed by the concat tool.
    """
    @abstractmethod
    def write(self, files: Sequence[str], manifest_path: Path) -> Path:
        """
        Creates/truncates manifest_path and writes one entry per file, in order.

        Raises:
            CreateOutputError: If the manifest cannot be created.
            WriteFileError: If an entry cannot be written.
        """
        pass


class IConcatRunner(ABC):
    """
    Contract for the concatenation engine.
    Abstracts away the underlying tool (FFmpeg) from the business logic.
    """
    @abstractmethod
    def run(self, manifest_path: Path, output_path: Path, overwrite: bool = False) -> ConcatResult:
        """
        Concatenates the manifest's inputs into output_path without re-encoding.

        Raises:
            CommandError: If the tool cannot be started.
        """
        pass
