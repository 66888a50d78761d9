from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vidcat.core.shared_types import MediaFile


@dataclass(frozen=True)
class ScanFilter:
    """
    User intent to collect the clips of one directory.

    - prefix: case-sensitive "starts with" test on the file name.
    - extension: case-insensitive exact match on the extension component.
      A single leading dot is tolerated (".mp4" == "mp4").
    """
    directory: Path
    prefix: str = ""
    extension: str = ""

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "directory", Path(self.directory))
        if self.extension.startswith("."):
            object.__setattr__(self, "extension", self.extension[1:])


@dataclass(frozen=True)
class ConcatRequest:
    scan_filter: ScanFilter
    output: MediaFile
    overwrite: bool = False
    # When set, the manifest is written here and left behind after the run
    manifest_path: Optional[Path] = None


@dataclass
class ConcatResult:
    """
    Outcome of a run where the external tool was actually started.

    Spawn failures never produce a result (they raise CommandError);
    a non-zero exit is reported here with the tool's diagnostics.
    """
    output_path: Path
    files: List[str] = field(default_factory=list)
    return_code: int = 0
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.return_code == 0

    def __bool__(self) -> bool:
        return self.success
